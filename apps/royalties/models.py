from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal

from apps.catalog.models import PLATFORM_CHOICES


class RoyaltySplit(models.Model):
    class Meta:
        app_label = 'royalties'
        db_table = 'royalty_splits'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(percentage__gt=0) & models.Q(percentage__lte=100),
                name='split_percentage_range'
            )
        ]

    RECIPIENT_CHOICES = [
        ('artist', 'Artist'),
        ('writer', 'Writer'),
        ('producer', 'Producer'),
        ('label', 'Label'),
    ]

    work = models.ForeignKey('catalog.Work', on_delete=models.CASCADE, related_name='royalty_splits')
    recipient_type = models.CharField(max_length=20, choices=RECIPIENT_CHOICES)
    # Interpreted according to recipient_type, not a foreign key
    recipient_id = models.BigIntegerField()
    percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01')), MaxValueValidator(Decimal('100'))]
    )
    role_description = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.recipient_type}:{self.recipient_id} {self.percentage}% of work {self.work_id}"


class RoyaltyReport(models.Model):
    class Meta:
        app_label = 'royalties'
        db_table = 'royalty_reports'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['tenant', 'platform', 'period_start', 'period_end'],
                name='unique_report_per_tenant_platform_period'
            ),
            models.CheckConstraint(
                condition=models.Q(period_start__lte=models.F('period_end')),
                name='report_period_ordered'
            ),
        ]
        indexes = [
            models.Index(fields=['tenant', 'period_start'], name='reports_tenant_period_idx'),
        ]

    PERIOD_CHOICES = [
        ('monthly', 'Monthly'),
        ('quarterly', 'Quarterly'),
        ('yearly', 'Yearly'),
    ]

    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.PROTECT, related_name='royalty_reports')
    platform = models.CharField(max_length=20, choices=PLATFORM_CHOICES)
    period_type = models.CharField(max_length=20, choices=PERIOD_CHOICES)
    period_start = models.DateField()
    period_end = models.DateField()
    total_streams = models.BigIntegerField(default=0)
    total_revenue = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    processed_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.platform} {self.period_start}..{self.period_end} (tenant {self.tenant_id})"


class WorkEarnings(models.Model):
    class Meta:
        app_label = 'royalties'
        db_table = 'work_earnings'
        ordering = ['id']
        verbose_name_plural = 'work earnings'
        indexes = [
            models.Index(fields=['work', 'platform'], name='earnings_work_platform_idx'),
        ]

    work = models.ForeignKey('catalog.Work', on_delete=models.PROTECT, related_name='earnings')
    royalty_report = models.ForeignKey(RoyaltyReport, on_delete=models.PROTECT, related_name='work_earnings')
    platform = models.CharField(max_length=20, choices=PLATFORM_CHOICES)
    streams = models.PositiveBigIntegerField(default=0)
    revenue = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)
