"""Admin interface for drop zones."""

from django.contrib import admin

from .models import Zone


@admin.register(Zone)
class ZoneAdmin(admin.ModelAdmin):
    """Admin interface for Zone with geometry shown in the changelist."""

    list_display = ["name", "x", "y", "width", "height", "answer_count", "updated_at"]
    search_fields = ["name", "description"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at", "created_by", "modified_by"]

    fieldsets = [
        ("Basic Information", {"fields": ("name", "description")}),
        ("Geometry", {"fields": ("x", "y", "width", "height")}),
        (
            "Audit Information",
            {
                "fields": ("created_by", "modified_by", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("answer_for_objects")

    @admin.display(description="Objects answered here")
    def answer_count(self, obj):
        return len(obj.answer_for_objects.all())

    def save_model(self, request, obj, form, change):
        """Record the admin making the change."""
        obj.save(user=request.user)
