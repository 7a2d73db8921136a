from django.contrib import admin

from .models import BusinessProfile


@admin.register(BusinessProfile)
class BusinessProfileAdmin(admin.ModelAdmin):
    list_display = ('business_name', 'user', 'industry', 'country', 'own_or_rent', 'current_step', 'completed_at')
    list_filter = ('country', 'own_or_rent', 'current_step')
    search_fields = ('business_name', 'industry', 'user__username', 'user__email')
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        ('Business Information', {
            'fields': ('user', 'business_name', 'industry', 'country', 'postal_code')
        }),
        ('Team & Space', {
            'fields': ('number_of_employees', 'location_size', 'location_unit', 'own_or_rent')
        }),
        ('Energy Use', {
            'fields': ('monthly_electricity_kwh', 'monthly_electricity_amount', 'electricity_currency',
                       'heating_fuel', 'monthly_heating_amount', 'heating_unit', 'energy_data_skipped')
        }),
        ('Operations', {
            'fields': ('has_vehicles', 'number_of_vehicles', 'employee_commute_pattern',
                       'business_flights_per_year', 'weekly_trash_bags')
        }),
        ('Tracking', {
            'fields': ('current_step', 'completed_at', 'created_at', 'updated_at')
        }),
    )
