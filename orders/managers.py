# orders/managers.py
from decimal import Decimal
from django.db import models


class OrderQuerySet(models.QuerySet):
    def for_user(self, user):
        """Get orders for specific user"""
        if not user.is_authenticated:
            return self.none()
        return self.filter(user=user)

    def with_items(self):
        """Optimize queries by prefetching order items"""
        return self.prefetch_related('items')

    def search(self, query):
        return self.filter(
            models.Q(order_number__icontains=query) |
            models.Q(customer_name__icontains=query) |
            models.Q(customer_email__icontains=query) |
            models.Q(customer_phone__icontains=query) |
            models.Q(transaction_id__icontains=query)
        )


class OrderManager(models.Manager.from_queryset(OrderQuerySet)):
    """Enhanced manager for Order model"""

    def status_counts(self):
        """Number of orders per status, with every status present"""
        from .models import Order
        counts = {status: 0 for status, _ in Order.ORDER_STATUS_CHOICES}
        for row in self.order_by().values('status').annotate(count=models.Count('id')):
            counts[row['status']] = row['count']
        return counts

    def total_revenue(self):
        """Sum of grand totals over delivered orders"""
        return self.filter(status='delivered').aggregate(
            total=models.Sum('grand_total')
        )['total'] or Decimal('0')

    def user_total_spent(self, user):
        """Calculate total amount spent by user"""
        return self.for_user(user).aggregate(
            total=models.Sum('grand_total')
        )['total'] or Decimal('0')


class OrderStatusHistoryManager(models.Manager):
    """Manager for OrderStatusHistory model"""

    def for_order(self, order):
        """Get status history for specific order"""
        return self.filter(order=order).order_by('created_at', 'id')

