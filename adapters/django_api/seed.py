"""
BangunanPro Django Adapter - Demo Seed Data
=============================================
Starting catalog and history for local runs. Seeded transactions are
recorded as history and do not touch stock.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from engines.inventory.models import Product
from engines.retail.models import (
    LineItem,
    PaymentMethod,
    Transaction,
    TransactionStatus,
)

SEED_PRODUCTS = (
    Product("1", "Semen Tiga Roda 50kg", "Material Dasar", "Sak", 65000, 58000, 150, 20),
    Product("2", "Cat Tembok Dulux Putih 5kg", "Cat & Pelapis", "Kaleng", 145000, 120000, 15, 5),
    Product("3", "Paku Beton 5cm", "Perkakas", "Box", 25000, 15000, 8, 10),
    Product("4", "Pasir Beton", "Material Dasar", "Pick Up", 250000, 200000, 40, 5),
    Product("5", "Bata Merah", "Material Dasar", "Pcs", 800, 600, 5000, 1000),
    Product("6", "Thinner A Special", "Cat & Pelapis", "Kaleng", 35000, 28000, 24, 10),
)


def _line(product: Product, quantity: int) -> LineItem:
    return LineItem(
        product_id=product.product_id,
        name=product.name,
        price=product.price,
        cost=product.cost,
        quantity=quantity,
    )


def seed_transactions(now: datetime) -> tuple[Transaction, ...]:
    semen = SEED_PRODUCTS[0]
    bata = SEED_PRODUCTS[4]
    return (
        Transaction(
            transaction_id="TRX-001",
            created_at=now,
            items=(_line(semen, 2),),
            total=130000,
            payment_method=PaymentMethod.CASH,
            customer_name="Umum",
            cashier_name="Siti",
            status=TransactionStatus.PAID,
            amount_paid=130000,
        ),
        Transaction(
            transaction_id="TRX-002",
            created_at=now - timedelta(days=1),
            items=(_line(bata, 500),),
            total=400000,
            payment_method=PaymentMethod.TEMPO,
            customer_name="Pak Ahmad (Proyek)",
            cashier_name="Siti",
            status=TransactionStatus.PENDING,
            amount_paid=100000,
        ),
    )
