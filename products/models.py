# products/models.py
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.urls import reverse
from django.utils.text import slugify
from .managers import ProductManager, ReviewManager


class Category(models.Model):
    FRUITS = 'fruits'
    TSHIRTS = 't-shirts'

    name = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(unique=True)
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True, help_text='Hosted thumbnail URL')
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'categories'
        verbose_name_plural = 'categories'
        ordering = ['name']

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('products:category', kwargs={'slug': self.slug})


class Product(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=120, unique=True, blank=True)
    description = models.TextField(blank=True)
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, related_name='products')
    price = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    image = models.URLField(max_length=500, blank=True, help_text='Hosted product image URL')
    stock = models.PositiveIntegerField(default=0)
    has_variants = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductManager()

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self):
        base = slugify(self.name) or 'product'
        slug, counter = base, 2
        while Product.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    def get_absolute_url(self):
        return reverse('products:product_detail', kwargs={'product_id': self.pk})

    @property
    def default_variant(self):
        """Variant preselected on the product page"""
        if not self.has_variants:
            return None
        variants = list(self.variants.all())
        for variant in variants:
            if variant.is_default:
                return variant
        return variants[0] if variants else None

    @property
    def available_stock(self):
        if self.has_variants:
            return sum(variant.stock for variant in self.variants.all())
        return self.stock

    @property
    def is_available(self):
        return self.is_active and self.available_stock > 0

    def price_for(self, variant=None):
        """Unit price for this product, honouring a variant price override."""
        if variant is not None and variant.price is not None:
            return variant.price
        return self.price

    def get_rating(self):
        return Review.objects.rating_for(self)


class ProductVariant(models.Model):
    """Size (t-shirts) or amount (fruits) option of a product"""
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='variants')
    name = models.CharField(max_length=50)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        help_text='Leave empty to use the product price'
    )
    stock = models.PositiveIntegerField(default=0)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_variants'
        ordering = ['id']
        unique_together = ['product', 'name']

    def __str__(self):
        return f"{self.product.name} - {self.name}"

    @property
    def effective_price(self):
        return self.product.price_for(self)

    @property
    def in_stock(self):
        return self.stock > 0

    def save(self, *args, **kwargs):
        # First variant of a product is its default; only one default per product
        siblings = ProductVariant.objects.filter(product=self.product).exclude(pk=self.pk)
        if not siblings.exists():
            self.is_default = True
        if self.is_default:
            siblings.filter(is_default=True).update(is_default=False)
        super().save(*args, **kwargs)

        if not self.product.has_variants:
            Product.objects.filter(pk=self.product_id).update(has_variants=True)
            self.product.has_variants = True


class Review(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(
        default=5,
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    objects = ReviewManager()

    class Meta:
        db_table = 'reviews'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.rating}/5 for {self.product.name} by {self.user}"

    @property
    def author_name(self):
        return self.user.get_full_name()
