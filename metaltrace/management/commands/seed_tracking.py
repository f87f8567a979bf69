"""
Management command to seed demo control points and operators.

Usage:
    python manage.py seed_tracking
    python manage.py seed_tracking --password s3nha --dry-run
    python manage.py seed_tracking --skip-operators
"""

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from metaltrace.models import ControlPoint, ControlPointType, Operator, Role


CONTROL_POINTS = [
    {
        'name': 'Главный завод',
        'type': ControlPointType.FACTORY,
        'address': 'г. Москва, ул. Промышленная, 1',
        'latitude': Decimal('55.75124400'),
        'longitude': Decimal('37.61842300'),
    },
    {
        'name': 'Склад №1',
        'type': ControlPointType.STORAGE,
        'address': 'г. Москва, ул. Складская, 15',
        'latitude': Decimal('55.75624400'),
        'longitude': Decimal('37.62842300'),
    },
    {
        'name': 'Стройплощадка "Москва-Сити"',
        'type': ControlPointType.USAGE_SITE,
        'address': 'г. Москва, Пресненская наб.',
        'latitude': Decimal('55.74924400'),
        'longitude': Decimal('37.53842300'),
    },
]


class Command(BaseCommand):
    """Seed control points and one operator per role."""

    help = 'Cria pontos de controle e operadores de demonstração'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            default='operator123',
            help='Senha dos operadores criados'
        )
        parser.add_argument(
            '--skip-operators',
            action='store_true',
            help='Cria apenas os pontos de controle'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Mostra o que seria criado sem executar'
        )

    def handle(self, *args, **options):
        User = get_user_model()
        missing_points = [
            p for p in CONTROL_POINTS
            if not ControlPoint.objects.filter(name=p['name']).exists()
        ]
        missing_roles = [] if options['skip_operators'] else [
            role for role in Role.values
            if not User.objects.filter(email=self._email(role)).exists()
        ]

        if options['dry_run']:
            self.stdout.write(
                f'{len(missing_points)} ponto(s) de controle e '
                f'{len(missing_roles)} operador(es) seria(m) criado(s)'
            )
            return

        with transaction.atomic():
            for data in missing_points:
                ControlPoint.objects.create(**data)

            for role in missing_roles:
                email = self._email(role)
                user = User.objects.create_user(
                    username=email,
                    email=email,
                    password=options['password'],
                )
                Operator.objects.create(user=user, role=role)

        self.stdout.write(
            self.style.SUCCESS(
                f'{len(missing_points)} ponto(s) de controle e '
                f'{len(missing_roles)} operador(es) criado(s)'
            )
        )

    @staticmethod
    def _email(role: str) -> str:
        return f'{role}@example.com'
