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
            name='CarbonFootprint',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('total_kg_co2e_annual', models.FloatField(help_text='Total annual footprint in kg CO2e')),
                ('data_source', models.TextField(blank=True, help_text='How the footprint was calculated', null=True)),
                ('breakdown', models.JSONField(default=list, help_text='List of {category, kgCO2e, percent, status?, notes?}')),
                ('calculation_notes', models.TextField(blank=True, null=True)),
                ('recommendations', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='carbon_footprints', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Carbon Footprint',
                'verbose_name_plural': 'Carbon Footprints',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='ActionPlan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('executive_summary', models.TextField()),
                ('prioritized_next_step', models.JSONField(help_text='{id, title, description, impact, cost, paybackPeriod}')),
                ('quick_wins', models.JSONField(default=list, help_text='3-5 {id, title, description}')),
                ('full_action_plan', models.JSONField(default=list, help_text='8-15 {id, category, title, description, impact, cost}')),
                ('rent_constraint_flags', models.JSONField(blank=True, default=list, help_text='Ids of actions recommending building modifications although the business rents')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('footprint', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='action_plan', to='footprint.carbonfootprint')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='action_plans', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Action Plan',
                'verbose_name_plural': 'Action Plans',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='CompletedAction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action_id', models.CharField(max_length=255)),
                ('action_type', models.CharField(choices=[('priority', 'Prioritized next step'), ('quickwin', 'Quick win'), ('actionplan', 'Action plan item')], max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='completed_actions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Completed Action',
                'verbose_name_plural': 'Completed Actions',
            },
        ),
        migrations.AddConstraint(
            model_name='completedaction',
            constraint=models.UniqueConstraint(fields=('user', 'action_id'), name='unique_completed_action_per_user'),
        ),
    ]
