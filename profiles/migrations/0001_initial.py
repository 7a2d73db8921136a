from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='BusinessProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('business_name', models.CharField(blank=True, max_length=256, null=True)),
                ('industry', models.CharField(blank=True, max_length=256, null=True)),
                ('country', models.CharField(blank=True, max_length=256, null=True)),
                ('postal_code', models.CharField(blank=True, max_length=50, null=True)),
                ('number_of_employees', models.PositiveIntegerField(blank=True, null=True)),
                ('location_size', models.FloatField(blank=True, null=True)),
                ('location_unit', models.CharField(blank=True, choices=[('sqft', 'Square feet'), ('sqm', 'Square meters')], max_length=10, null=True)),
                ('own_or_rent', models.CharField(blank=True, choices=[('own', 'Own'), ('rent', 'Rent')], max_length=10, null=True)),
                ('monthly_electricity_kwh', models.FloatField(blank=True, null=True)),
                ('monthly_electricity_amount', models.FloatField(blank=True, help_text='Currency fallback when kWh is unknown', null=True)),
                ('electricity_currency', models.CharField(blank=True, max_length=10, null=True)),
                ('heating_fuel', models.CharField(blank=True, max_length=50, null=True)),
                ('monthly_heating_amount', models.FloatField(blank=True, null=True)),
                ('heating_unit', models.CharField(blank=True, help_text='e.g. therms, gallons', max_length=20, null=True)),
                ('energy_data_skipped', models.BooleanField(default=False)),
                ('has_vehicles', models.BooleanField(blank=True, null=True)),
                ('number_of_vehicles', models.PositiveIntegerField(blank=True, null=True)),
                ('employee_commute_pattern', models.CharField(blank=True, max_length=50, null=True)),
                ('business_flights_per_year', models.PositiveIntegerField(blank=True, null=True)),
                ('weekly_trash_bags', models.PositiveIntegerField(blank=True, null=True)),
                ('current_step', models.PositiveSmallIntegerField(default=1)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='business_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Business Profile',
                'verbose_name_plural': 'Business Profiles',
            },
        ),
    ]
