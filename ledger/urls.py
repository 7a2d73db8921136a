from django.urls import path

from . import views

urlpatterns = [
    path('', views.ceda_calculator, name='ceda-calculator'),
    path('categories/', views.ceda_categories, name='ceda-categories'),
    path('entries/', views.ledger_entries, name='ledger-entries'),
    path('entries/totals/', views.ledger_totals, name='ledger-totals'),
    path('entries/<int:entry_id>/', views.delete_ledger_entry, name='ledger-entry-delete'),
]
