"""Admin interface for game objects (the answer key)."""

from django.contrib import admin

from .models import GameObject


@admin.register(GameObject)
class GameObjectAdmin(admin.ModelAdmin):
    """Admin interface for GameObject."""

    list_display = ["name", "object_type", "correct_zone", "points", "updated_at"]
    list_filter = ["object_type", "correct_zone"]
    search_fields = ["name", "success_message", "error_message"]
    ordering = ["name"]
    readonly_fields = ["created_at", "updated_at", "created_by", "modified_by"]
    autocomplete_fields = ["correct_zone"]

    fieldsets = [
        ("Basic Information", {"fields": ("name", "object_type")}),
        ("Answer", {"fields": ("correct_zone", "points")}),
        ("Feedback", {"fields": ("success_message", "error_message")}),
        (
            "Audit Information",
            {
                "fields": ("created_by", "modified_by", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("correct_zone")

    def save_model(self, request, obj, form, change):
        """Record the admin making the change."""
        obj.save(user=request.user)
