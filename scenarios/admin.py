"""Admin interface for training scenarios."""

from django.contrib import admin

from .models import Scenario


@admin.register(Scenario)
class ScenarioAdmin(admin.ModelAdmin):
    """Admin interface for Scenario."""

    list_display = ["name", "customer_name", "zone_count", "object_count", "max_points"]
    list_filter = ["customer_name"]
    search_fields = ["name", "customer_name", "description"]
    ordering = ["customer_name", "name"]
    filter_horizontal = ["zones", "game_objects"]
    readonly_fields = ["created_at", "updated_at", "created_by", "modified_by"]

    fieldsets = [
        ("Basic Information", {"fields": ("name", "customer_name", "description")}),
        ("Content", {"fields": ("zones", "game_objects")}),
        (
            "Audit Information",
            {
                "fields": ("created_by", "modified_by", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).with_content()

    @admin.display(description="Zones")
    def zone_count(self, obj):
        return len(obj.zones.all())

    @admin.display(description="Objects")
    def object_count(self, obj):
        return len(obj.game_objects.all())

    @admin.display(description="Max score")
    def max_points(self, obj):
        return obj.max_score()

    def save_model(self, request, obj, form, change):
        """Record the admin making the change."""
        obj.save(user=request.user)
