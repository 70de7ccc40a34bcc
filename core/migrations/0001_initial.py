from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('it_solutions_available', models.BooleanField(default=True)),
                ('tshirt_page_available', models.BooleanField(default=True)),
                ('bkash_number', models.CharField(blank=True, max_length=20)),
                ('nagad_number', models.CharField(blank=True, max_length=20)),
                ('rocket_number', models.CharField(blank=True, max_length=20)),
                ('tshirts_thumbnail', models.URLField(blank=True, default='https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&h=400&fit=crop', max_length=500)),
                ('fruits_thumbnail', models.URLField(blank=True, default='https://images.unsplash.com/photo-1619566636858-adf3ef46400b?w=400&h=400&fit=crop', max_length=500)),
                ('delivery_icon', models.CharField(blank=True, default='truck', max_length=50)),
                ('quality_icon', models.CharField(blank=True, default='shield-check', max_length=50)),
                ('support_icon', models.CharField(blank=True, default='zap', max_length=50)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'site settings',
                'verbose_name_plural': 'site settings',
                'db_table': 'site_settings',
            },
        ),
    ]
