from django.contrib import admin
from .models import Category, Product, ProductVariant, Review


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ('name', 'price', 'stock', 'is_default')


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'price', 'stock', 'has_variants', 'is_active', 'created_at')
    list_filter = ('category', 'is_active', 'has_variants')
    search_fields = ('name', 'description')
    inlines = [ProductVariantInline]


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('product', 'user', 'rating', 'created_at')
    list_filter = ('rating', 'created_at')
    search_fields = ('product__name', 'user__email', 'comment')


admin.site.register(Category)
