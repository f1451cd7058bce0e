"""
BangunanPro Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("session", views.session_view),
    path("products", views.products_view),
    path("inventory", views.inventory_view),
    path("inventory/restock", views.inventory_restock_view),
    path("cart", views.cart_view),
    path("cart/add", views.cart_add_view),
    path("cart/update", views.cart_update_view),
    path("cart/remove", views.cart_remove_view),
    path("cart/clear", views.cart_clear_view),
    path("checkout", views.checkout_view),
    path("transactions", views.transactions_view),
    path("debts", views.debts_view),
    path("debts/settle", views.debts_settle_view),
    path("dashboard", views.dashboard_view),
    path("advisor/ask", views.advisor_ask_view),
]
