from django.db import models
from django.core.exceptions import ValidationError


class Tenant(models.Model):
    class Meta:
        app_label = 'tenants'
        db_table = 'tenants'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(max_artists__gt=0) & models.Q(max_works__gt=0),
                name='tenant_ceilings_positive'
            )
        ]

    PLAN_CHOICES = [
        ('free', 'Free'),
        ('standard', 'Standard'),
        ('pro', 'Pro'),
    ]

    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=100, unique=True)
    contact_email = models.EmailField()
    website = models.URLField(blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    subscription_plan = models.CharField(max_length=20, choices=PLAN_CHOICES, default='free')
    max_artists = models.PositiveIntegerField(default=5)
    max_works = models.PositiveIntegerField(default=50)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.name} ({self.slug})"

    def clean(self):
        if not self.max_artists or not self.max_works:
            raise ValidationError("max_artists and max_works must be positive integers")

    def ceiling_for(self, resource):
        return {'artists': self.max_artists, 'works': self.max_works}[resource]
