import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Artist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.BigIntegerField(blank=True, null=True)),
                ('stage_name', models.CharField(max_length=200)),
                ('legal_name', models.CharField(blank=True, max_length=200, null=True)),
                ('bio', models.TextField(blank=True, null=True)),
                ('avatar_url', models.URLField(blank=True, null=True)),
                ('genres', models.JSONField(blank=True, default=list)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='artists', to='tenants.tenant')),
            ],
            options={
                'db_table': 'artists',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['tenant', 'is_active'], name='artists_tenant_active_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Work',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('album', models.CharField(blank=True, max_length=255, null=True)),
                ('genre', models.CharField(max_length=100)),
                ('duration_seconds', models.PositiveIntegerField()),
                ('release_date', models.DateField(blank=True, null=True)),
                ('isrc', models.CharField(blank=True, max_length=15, null=True)),
                ('upc', models.CharField(blank=True, max_length=14, null=True)),
                ('audio_url', models.URLField(blank=True, max_length=500, null=True)),
                ('artwork_url', models.URLField(blank=True, max_length=500, null=True)),
                ('lyrics', models.TextField(blank=True, null=True)),
                ('is_explicit', models.BooleanField(default=False)),
                ('distribution_status', models.CharField(choices=[('pending', 'Pending'), ('processing', 'Processing'), ('live', 'Live'), ('failed', 'Failed'), ('removed', 'Removed')], default='pending', max_length=20)),
                ('distribution_platforms', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='works', to='catalog.artist')),
                ('tenant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='works', to='tenants.tenant')),
            ],
            options={
                'db_table': 'works',
                'ordering': ['id'],
                'indexes': [
                    models.Index(fields=['tenant', 'distribution_status'], name='works_tenant_status_idx'),
                    models.Index(fields=['artist'], name='works_artist_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('duration_seconds__gt', 0)),
                        name='work_duration_positive',
                    ),
                ],
            },
        ),
    ]
