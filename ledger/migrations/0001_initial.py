from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SpendEmissionEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category', models.CharField(help_text='CEDA spending category', max_length=255)),
                ('country', models.CharField(max_length=256)),
                ('spend_amount', models.FloatField(help_text='Spend in USD')),
                ('emission_factor', models.FloatField(help_text='kg CO2e per USD')),
                ('total_emissions', models.FloatField(help_text='kg CO2e')),
                ('description', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='spend_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Spend Emission Entry',
                'verbose_name_plural': 'Spend Emission Entries',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
