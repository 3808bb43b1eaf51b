import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models

PLATFORM_CHOICES = [
    ('spotify', 'Spotify'),
    ('apple_music', 'Apple Music'),
    ('youtube_music', 'YouTube Music'),
    ('amazon_music', 'Amazon Music'),
    ('deezer', 'Deezer'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RoyaltySplit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('recipient_type', models.CharField(choices=[('artist', 'Artist'), ('writer', 'Writer'), ('producer', 'Producer'), ('label', 'Label')], max_length=20)),
                ('recipient_id', models.BigIntegerField()),
                ('percentage', models.DecimalField(decimal_places=2, max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01')), django.core.validators.MaxValueValidator(Decimal('100'))])),
                ('role_description', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('work', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='royalty_splits', to='catalog.work')),
            ],
            options={
                'db_table': 'royalty_splits',
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('percentage__gt', 0), ('percentage__lte', 100)),
                        name='split_percentage_range',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='RoyaltyReport',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('platform', models.CharField(choices=PLATFORM_CHOICES, max_length=20)),
                ('period_type', models.CharField(choices=[('monthly', 'Monthly'), ('quarterly', 'Quarterly'), ('yearly', 'Yearly')], max_length=20)),
                ('period_start', models.DateField()),
                ('period_end', models.DateField()),
                ('total_streams', models.BigIntegerField(default=0)),
                ('total_revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('processed_at', models.DateTimeField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='royalty_reports', to='tenants.tenant')),
            ],
            options={
                'db_table': 'royalty_reports',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['tenant', 'period_start'], name='reports_tenant_period_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(
                        fields=('tenant', 'platform', 'period_start', 'period_end'),
                        name='unique_report_per_tenant_platform_period',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('period_start__lte', models.F('period_end'))),
                        name='report_period_ordered',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='WorkEarnings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('platform', models.CharField(choices=PLATFORM_CHOICES, max_length=20)),
                ('streams', models.PositiveBigIntegerField(default=0)),
                ('revenue', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('royalty_report', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='work_earnings', to='royalties.royaltyreport')),
                ('work', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='earnings', to='catalog.work')),
            ],
            options={
                'db_table': 'work_earnings',
                'ordering': ['id'],
                'verbose_name_plural': 'work earnings',
                'indexes': [
                    models.Index(fields=['work', 'platform'], name='earnings_work_platform_idx'),
                ],
            },
        ),
    ]
