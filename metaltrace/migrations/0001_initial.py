"""
Initial migration for Metaltrace models.
"""

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Metaltrace models: ControlPoint, Element, Movement, Operator."""

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ControlPoint',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Nome')),
                ('type', models.CharField(choices=[('factory', 'Fábrica'), ('storage', 'Depósito'), ('usage_site', 'Canteiro de obra')], help_text='Define o status do elemento ao chegar aqui.', max_length=20, verbose_name='Tipo')),
                ('address', models.TextField(blank=True, default='', verbose_name='Endereço')),
                ('latitude', models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True, verbose_name='Latitude')),
                ('longitude', models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True, verbose_name='Longitude')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Ponto de Controle',
                'verbose_name_plural': 'Pontos de Controle',
                'ordering': ['name', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Element',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='Marcação DataMatrix (ex: BM-2024-001547)', max_length=64, unique=True, verbose_name='Código')),
                ('type', models.CharField(choices=[('beam', 'Viga'), ('column', 'Pilar'), ('truss', 'Treliça'), ('connection', 'Ligação')], max_length=20, verbose_name='Tipo')),
                ('status', models.CharField(choices=[('production', 'Em produção'), ('ready_to_ship', 'Pronto p/ envio'), ('in_transit', 'Em trânsito'), ('in_storage', 'Em depósito'), ('in_assembly', 'Em montagem'), ('in_operation', 'Em operação')], db_index=True, default='production', max_length=20, verbose_name='Status')),
                ('drawing', models.CharField(blank=True, default='', max_length=100, verbose_name='Desenho')),
                ('batch', models.CharField(blank=True, default='', max_length=100, verbose_name='Lote')),
                ('gost', models.CharField(blank=True, default='', max_length=100, verbose_name='Norma GOST')),
                ('length', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Comprimento')),
                ('width', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Largura')),
                ('height', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Altura')),
                ('weight', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name='Peso')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('current_location', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='elements', to='metaltrace.controlpoint', verbose_name='Localização atual')),
            ],
            options={
                'verbose_name': 'Elemento',
                'verbose_name_plural': 'Elementos',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['status', 'type'], name='metaltrace_el_status_type_idx')],
            },
        ),
        migrations.CreateModel(
            name='Movement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('operation', models.CharField(choices=[('reception', 'Recebimento'), ('shipping', 'Expedição'), ('inventory', 'Inventário')], max_length=20, verbose_name='Operação')),
                ('comments', models.TextField(blank=True, default='', verbose_name='Comentários')),
                ('photo_url', models.CharField(blank=True, default='', max_length=500, verbose_name='Foto')),
                ('latitude', models.DecimalField(blank=True, decimal_places=8, max_digits=10, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=8, max_digits=11, null=True)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Data/Hora')),
                ('element', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='movements', to='metaltrace.element', verbose_name='Elemento')),
                ('from_location', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='movements_from', to='metaltrace.controlpoint', verbose_name='Origem')),
                ('to_location', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='movements_to', to='metaltrace.controlpoint', verbose_name='Destino')),
                ('operator', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Operador')),
            ],
            options={
                'verbose_name': 'Movimentação',
                'verbose_name_plural': 'Movimentações',
                'ordering': ['-timestamp', '-id'],
                'indexes': [models.Index(fields=['element', 'timestamp'], name='metaltrace_mv_element_ts_idx')],
            },
        ),
        migrations.CreateModel(
            name='Operator',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('administrator', 'Administrador'), ('customer_operator', 'Operador do cliente'), ('factory_operator', 'Operador da fábrica'), ('warehouse_keeper', 'Almoxarife'), ('site_master', 'Mestre de obras')], default='customer_operator', max_length=30, verbose_name='Papel')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='operator', to=settings.AUTH_USER_MODEL, verbose_name='Usuário')),
            ],
            options={
                'verbose_name': 'Operador',
                'verbose_name_plural': 'Operadores',
            },
        ),
    ]
