# products/managers.py
from decimal import Decimal, ROUND_HALF_UP
from django.db import models


class ProductManager(models.Manager):
    def active(self):
        """Get active products only."""
        return self.filter(is_active=True)

    def in_category(self, slug):
        """Get active products for a category slug."""
        return self.active().filter(category__slug=slug)

    def with_related_data(self):
        """Optimize queries for product pages."""
        return self.select_related('category').prefetch_related('variants')

    def search(self, query):
        return self.active().filter(
            models.Q(name__icontains=query) | models.Q(description__icontains=query)
        )


class ReviewManager(models.Manager):
    def for_product(self, product):
        """Reviews for a product, newest first."""
        return self.filter(product=product).select_related('user').order_by('-created_at', '-id')

    def rating_for(self, product):
        """Average rating rounded to one decimal and review count."""
        stats = self.filter(product=product).aggregate(
            average=models.Avg('rating'),
            count=models.Count('id'),
        )
        if not stats['count']:
            return {'average': 0, 'count': 0}
        return {
            'average': float(
                Decimal(str(stats['average'])).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
            ),
            'count': stats['count'],
        }
