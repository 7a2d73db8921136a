from django.contrib import admin

from .models import ActionPlan, CarbonFootprint, CompletedAction


class ActionPlanInline(admin.StackedInline):
    model = ActionPlan
    can_delete = False
    extra = 0
    readonly_fields = ('executive_summary', 'prioritized_next_step', 'quick_wins',
                       'full_action_plan', 'rent_constraint_flags', 'created_at')


@admin.register(CarbonFootprint)
class CarbonFootprintAdmin(admin.ModelAdmin):
    list_display = ('user', 'total_kg_co2e_annual', 'data_source', 'created_at')
    search_fields = ('user__username', 'user__email')
    readonly_fields = ('user', 'total_kg_co2e_annual', 'data_source', 'breakdown',
                       'calculation_notes', 'recommendations', 'created_at')
    inlines = [ActionPlanInline]

    def has_change_permission(self, request, obj=None):
        # Snapshots are immutable
        return False


@admin.register(CompletedAction)
class CompletedActionAdmin(admin.ModelAdmin):
    list_display = ('user', 'action_id', 'action_type', 'created_at')
    list_filter = ('action_type',)
    search_fields = ('user__username', 'action_id')
