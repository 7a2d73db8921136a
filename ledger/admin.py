from django.contrib import admin

from .models import SpendEmissionEntry


@admin.register(SpendEmissionEntry)
class SpendEmissionEntryAdmin(admin.ModelAdmin):
    list_display = ('user', 'category', 'country', 'spend_amount', 'emission_factor', 'total_emissions', 'created_at')
    list_filter = ('country',)
    search_fields = ('user__username', 'category', 'description')
    readonly_fields = ('emission_factor', 'total_emissions', 'created_at')
