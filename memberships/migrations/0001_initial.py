import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='MembershipType',
            fields=[
                ('id', models.SlugField(help_text='Machine name of the membership type', max_length=100, primary_key=True, serialize=False)),
                ('label', models.CharField(max_length=255)),
                ('provider', models.CharField(default='authnet', help_text='Membership provider plugin id', max_length=100)),
                ('provider_configuration', models.JSONField(blank=True, default=dict, help_text='Provider plugin configuration')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Membership Type',
                'verbose_name_plural': 'Membership Types',
                'ordering': ['label'],
            },
        ),
        migrations.CreateModel(
            name='MembershipOffer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('label', models.CharField(help_text="Display name of the offer (e.g., 'Monthly membership')", max_length=255)),
                ('price_number', models.DecimalField(decimal_places=6, max_digits=19)),
                ('currency_code', models.CharField(default='USD', help_text='Currency code (ISO 4217)', max_length=3)),
                ('is_active', models.BooleanField(default=True, help_text='Whether this offer is available for purchase')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('membership_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='memberships.membershiptype')),
            ],
            options={
                'verbose_name': 'Membership Offer',
                'verbose_name_plural': 'Membership Offers',
                'ordering': ['price_number'],
            },
        ),
        migrations.CreateModel(
            name='Membership',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('active', 'Active'), ('billing_failed', 'Billing failed')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('membership_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='memberships', to='memberships.membershiptype')),
                ('offer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='memberships', to='memberships.membershipoffer')),
                ('user', models.ForeignKey(help_text='Account holder', on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Membership',
                'verbose_name_plural': 'Memberships',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'status'], name='membership_user_status_idx'),
                ],
            },
        ),
    ]
