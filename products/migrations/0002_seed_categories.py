from django.db import migrations

CATEGORIES = [
    {
        'name': 'Fruits',
        'slug': 'fruits',
        'description': 'Fresh seasonal fruits delivered to your door',
        'image': 'https://images.unsplash.com/photo-1619566636858-adf3ef46400b?w=400&h=400&fit=crop',
    },
    {
        'name': 'T-Shirts',
        'slug': 't-shirts',
        'description': 'Comfortable cotton t-shirts in every size',
        'image': 'https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&h=400&fit=crop',
    },
]


def create_categories(apps, schema_editor):
    Category = apps.get_model('products', 'Category')
    for data in CATEGORIES:
        Category.objects.get_or_create(slug=data['slug'], defaults=data)


def remove_categories(apps, schema_editor):
    Category = apps.get_model('products', 'Category')
    Category.objects.filter(slug__in=[c['slug'] for c in CATEGORIES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_categories, remove_categories),
    ]
