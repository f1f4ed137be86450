from django.contrib import admin

from events.models import Category, Event, EventCategory, Registration


class EventCategoryInline(admin.TabularInline):
    model = EventCategory
    extra = 1


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    readonly_fields = ["registration_date"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "event_date", "capacity", "is_private", "created_by_id"]
    list_filter = ["is_private", "categories"]
    search_fields = ["title", "address", "created_by_id"]
    inlines = [EventCategoryInline, RegistrationInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "color", "icon"]
    search_fields = ["name"]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["event", "user_id", "registration_date"]
    list_filter = ["event"]
    search_fields = ["user_id"]
