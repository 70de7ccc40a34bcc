import django.db.models.deletion
import users.validators
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order_number', models.CharField(editable=False, max_length=20, unique=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('processing', 'Processing'), ('shipped', 'Shipped'), ('delivered', 'Delivered')], default='pending', max_length=20)),
                ('tracking_id', models.CharField(blank=True, max_length=100)),
                ('customer_name', models.CharField(max_length=100)),
                ('customer_email', models.EmailField(max_length=254)),
                ('customer_phone', models.CharField(max_length=14, validators=[users.validators.BangladeshPhoneValidator()])),
                ('district', models.CharField(choices=[('Dhaka', 'Dhaka'), ('Chittagong', 'Chittagong'), ('Rajshahi', 'Rajshahi'), ('Khulna', 'Khulna'), ('Bagerhat', 'Bagerhat'), ('Barisal', 'Barisal'), ('Sylhet', 'Sylhet'), ('Rangpur', 'Rangpur'), ('Mymensingh', 'Mymensingh'), ('Comilla', 'Comilla'), ('Narayanganj', 'Narayanganj'), ('Gazipur', 'Gazipur'), ('Tangail', 'Tangail'), ('Jamalpur', 'Jamalpur'), ('Sherpur', 'Sherpur'), ('Netrokona', 'Netrokona'), ('Kishoreganj', 'Kishoreganj'), ('Manikganj', 'Manikganj'), ('Munshiganj', 'Munshiganj'), ('Narsingdi', 'Narsingdi'), ('Faridpur', 'Faridpur'), ('Gopalganj', 'Gopalganj'), ('Madaripur', 'Madaripur'), ('Rajbari', 'Rajbari'), ('Shariatpur', 'Shariatpur'), ('Brahmanbaria', 'Brahmanbaria'), ('Chandpur', 'Chandpur'), ('Lakshmipur', 'Lakshmipur'), ('Noakhali', 'Noakhali'), ('Feni', 'Feni'), ("Cox's Bazar", "Cox's Bazar"), ('Bandarban', 'Bandarban'), ('Rangamati', 'Rangamati'), ('Khagrachhari', 'Khagrachhari'), ('Patuakhali', 'Patuakhali'), ('Pirojpur', 'Pirojpur'), ('Jhalokati', 'Jhalokati'), ('Barguna', 'Barguna'), ('Bhola', 'Bhola'), ('Jessore', 'Jessore'), ('Narail', 'Narail'), ('Magura', 'Magura'), ('Satkhira', 'Satkhira'), ('Meherpur', 'Meherpur'), ('Chuadanga', 'Chuadanga'), ('Kushtia', 'Kushtia'), ('Jhenaidah', 'Jhenaidah'), ('Bogra', 'Bogra'), ('Joypurhat', 'Joypurhat'), ('Naogaon', 'Naogaon'), ('Natore', 'Natore'), ('Chapainawabganj', 'Chapainawabganj'), ('Pabna', 'Pabna'), ('Sirajganj', 'Sirajganj'), ('Habiganj', 'Habiganj'), ('Moulvibazar', 'Moulvibazar'), ('Sunamganj', 'Sunamganj'), ('Kurigram', 'Kurigram'), ('Lalmonirhat', 'Lalmonirhat'), ('Nilphamari', 'Nilphamari'), ('Panchagarh', 'Panchagarh'), ('Thakurgaon', 'Thakurgaon'), ('Dinajpur', 'Dinajpur'), ('Gaibandha', 'Gaibandha')], max_length=50)),
                ('address', models.TextField()),
                ('payment_method', models.CharField(choices=[('bKash', 'bKash'), ('Nagad', 'Nagad'), ('Rocket', 'Rocket')], default='bKash', max_length=10)),
                ('payment_number', models.CharField(blank=True, max_length=20)),
                ('transaction_id', models.CharField(max_length=50)),
                ('last_three_digits', models.CharField(max_length=3, validators=[users.validators.LastThreeDigitsValidator()])),
                ('subtotal', models.DecimalField(decimal_places=2, max_digits=12)),
                ('delivery_charge', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('discount', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('coupon_code', models.CharField(blank=True, max_length=30)),
                ('grand_total', models.DecimalField(decimal_places=2, max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(blank=True, help_text='Empty for guest orders', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_name', models.CharField(max_length=100)),
                ('variant_name', models.CharField(blank=True, max_length=50)),
                ('category', models.CharField(blank=True, max_length=50)),
                ('image', models.URLField(blank=True, max_length=500)),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('quantity', models.PositiveIntegerField()),
                ('line_total', models.DecimalField(decimal_places=2, max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.order')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='products.product')),
                ('variant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='products.productvariant')),
            ],
            options={
                'db_table': 'order_items',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='OrderStatusHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('previous_status', models.CharField(blank=True, max_length=20)),
                ('new_status', models.CharField(max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('changed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='status_history', to='orders.order')),
            ],
            options={
                'verbose_name_plural': 'order status history',
                'db_table': 'order_status_history',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
