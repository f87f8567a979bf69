"""
Bearer tokens and operator accounts.

Tokens are django.core.signing payloads ({"uid": pk}) with a timestamp,
valid for TOKEN_MAX_AGE seconds. Accounts are regular Django users with an
Operator row holding the role.

Usage:
    user, token = login('admin@example.com', 'secret')
    user = resolve_token(token)
    require_role(user, [Role.ADMINISTRATOR])
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core import signing
from django.core.exceptions import ValidationError
from django.db import transaction

from metaltrace.conf import metaltrace_settings
from metaltrace.exceptions import TrackingError
from metaltrace.models.enums import Role
from metaltrace.models.operator import Operator

logger = logging.getLogger('metaltrace')


def issue_token(user) -> str:
    """Signed, timestamped token for the user."""
    return signing.dumps({'uid': user.pk}, salt=metaltrace_settings.TOKEN_SALT, compress=True)


def resolve_token(token: str):
    """
    User behind a bearer token.

    Raises:
        TrackingError('TOKEN_EXPIRED'): Older than TOKEN_MAX_AGE
        TrackingError('INVALID_TOKEN'): Tampered or foreign token
        TrackingError('NOT_AUTHENTICATED'): User missing, inactive or without role
    """
    try:
        payload = signing.loads(
            token,
            salt=metaltrace_settings.TOKEN_SALT,
            max_age=metaltrace_settings.TOKEN_MAX_AGE,
        )
    except signing.SignatureExpired:
        raise TrackingError('TOKEN_EXPIRED')
    except signing.BadSignature:
        raise TrackingError('INVALID_TOKEN')

    User = get_user_model()
    user = User.objects.select_related('operator').filter(pk=payload.get('uid')).first()
    if user is None or not user.is_active or not hasattr(user, 'operator'):
        raise TrackingError('NOT_AUTHENTICATED')
    return user


def role_of(user) -> str | None:
    operator = getattr(user, 'operator', None)
    return operator.role if operator else None


def require_role(user, roles) -> None:
    """
    Raises:
        TrackingError('PERMISSION_DENIED'): If the user's role is not in roles
    """
    role = role_of(user)
    if role not in roles:
        raise TrackingError('PERMISSION_DENIED', role=role, allowed=[str(r) for r in roles])


def login(identifier: str, password: str):
    """
    Authenticate by e-mail or username.

    Returns:
        (user, token)

    Raises:
        TrackingError('INVALID_CREDENTIALS')
    """
    User = get_user_model()
    account = User.objects.filter(email__iexact=identifier).first() if identifier else None
    username = account.get_username() if account else identifier

    user = authenticate(username=username, password=password)
    if user is None or not hasattr(user, 'operator'):
        logger.warning("auth.login_failed", extra={"identifier": identifier})
        raise TrackingError('INVALID_CREDENTIALS')

    logger.info("auth.login", extra={"user_id": user.pk, "role": user.operator.role})
    return user, issue_token(user)


def register(email: str, password: str, first_name: str = '', last_name: str = ''):
    """
    Create a customer account. The role is never chosen by the client.

    Returns:
        (user, token)

    Raises:
        TrackingError('VALIDATION_ERROR'): Duplicate e-mail or weak password
    """
    User = get_user_model()
    if User.objects.filter(email__iexact=email).exists():
        raise TrackingError('VALIDATION_ERROR', field='email', errors={'email': ['E-mail já cadastrado']})

    try:
        validate_password(password)
    except ValidationError as e:
        raise TrackingError('VALIDATION_ERROR', field='password', errors={'password': list(e.messages)})

    with transaction.atomic():
        user = User.objects.create_user(
            username=email,
            email=email,
            password=password,
            first_name=first_name or '',
            last_name=last_name or '',
        )
        Operator.objects.create(user=user, role=Role.CUSTOMER_OPERATOR)

    logger.info("auth.register", extra={"user_id": user.pk})
    return user, issue_token(user)
