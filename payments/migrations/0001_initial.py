import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('memberships', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PaymentGateway',
            fields=[
                ('id', models.SlugField(help_text="Machine name of the gateway (e.g., 'authnet_sandbox')", max_length=100, primary_key=True, serialize=False)),
                ('label', models.CharField(help_text='Display name of the gateway', max_length=255)),
                ('plugin', models.CharField(help_text="Gateway implementation (e.g., 'authorizenet_acceptjs')", max_length=100)),
                ('mode', models.CharField(choices=[('test', 'Test'), ('live', 'Live')], default='test', help_text='Whether the gateway talks to the sandbox or the live processor', max_length=10)),
                ('configuration', models.JSONField(blank=True, default=dict, help_text='Plugin credentials and settings')),
                ('status', models.BooleanField(default=True, help_text='Whether the gateway is enabled')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Payment Gateway',
                'verbose_name_plural': 'Payment Gateways',
                'ordering': ['label'],
            },
        ),
        migrations.CreateModel(
            name='PaymentMethod',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('credit_card', 'Credit Card'), ('bank_account', 'Bank Account')], default='credit_card', max_length=50)),
                ('remote_id', models.CharField(blank=True, help_text='Payment profile id at the processor', max_length=255)),
                ('card_type', models.CharField(blank=True, max_length=50)),
                ('card_number', models.CharField(blank=True, help_text='Last 4 digits of the card', max_length=4)),
                ('is_reusable', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(help_text='User who owns this payment method', on_delete=django.db.models.deletion.CASCADE, related_name='payment_methods', to=settings.AUTH_USER_MODEL)),
                ('payment_gateway', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payment_methods', to='payments.paymentgateway')),
            ],
            options={
                'verbose_name': 'Payment Method',
                'verbose_name_plural': 'Payment Methods',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('payment_default', 'Default'), ('authnet_subscription', 'Authorize.net Subscription Payment')], default='payment_default', max_length=50)),
                ('amount', models.DecimalField(decimal_places=6, max_digits=19)),
                ('currency_code', models.CharField(help_text='Currency code (ISO 4217)', max_length=3)),
                ('state', models.CharField(choices=[('new', 'New'), ('authorization', 'Authorization'), ('completed', 'Completed'), ('authorization_voided', 'Authorization voided')], default='new', max_length=50)),
                ('remote_id', models.CharField(blank=True, help_text='Transaction id at the processor', max_length=255)),
                ('remote_state', models.CharField(blank=True, max_length=255)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('membership', models.ForeignKey(blank=True, help_text='The related membership', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='memberships.membership')),
                ('payment_gateway', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='payments.paymentgateway')),
                ('payment_method', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='payments', to='payments.paymentmethod')),
            ],
            options={
                'verbose_name': 'Payment',
                'verbose_name_plural': 'Payments',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['type', 'state'], name='payment_type_state_idx'),
                    models.Index(fields=['remote_id'], name='payment_remote_id_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RemoteCustomer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('provider', models.CharField(max_length=150)),
                ('remote_id', models.CharField(help_text='Customer profile id at the processor', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='remote_customers', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Remote Customer',
                'verbose_name_plural': 'Remote Customers',
                'unique_together': {('user', 'provider')},
            },
        ),
    ]
