"""
Input forms for the JSON API.

Payload keys arrive in camelCase and are converted to snake_case by the
views before binding, so fields here use Python names.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django import forms
from django.core.exceptions import ValidationError

from metaltrace.models.enums import ElementStatus, ElementType, MovementOperation


class CoordinateField(forms.DecimalField):
    """GPS coordinate, rounded to 8 decimal places before the digit checks."""

    PLACES = Decimal('1e-8')

    def __init__(self, max_digits, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(max_digits=max_digits, decimal_places=8, **kwargs)

    def to_python(self, value):
        value = super().to_python(value)
        if value is None or not value.is_finite():
            return value
        try:
            return value.quantize(self.PLACES, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValidationError(self.error_messages['invalid'], code='invalid')


def latitude_field():
    return CoordinateField(max_digits=10, min_value=-90, max_value=90)


def longitude_field():
    return CoordinateField(max_digits=11, min_value=-180, max_value=180)


class ControlPointForm(forms.Form):
    name = forms.CharField(max_length=200)
    # Free text here; the registry decides whether unknown types are accepted.
    type = forms.CharField(max_length=20)
    address = forms.CharField(required=False)
    latitude = latitude_field()
    longitude = longitude_field()


class ElementForm(forms.Form):
    """Marking form. Status and location are not accepted on create."""

    code = forms.CharField(max_length=64)
    type = forms.ChoiceField(choices=ElementType.choices)
    drawing = forms.CharField(max_length=100, required=False)
    batch = forms.CharField(max_length=100, required=False)
    gost = forms.CharField(max_length=100, required=False)
    length = forms.DecimalField(max_digits=10, decimal_places=2, required=False)
    width = forms.DecimalField(max_digits=10, decimal_places=2, required=False)
    height = forms.DecimalField(max_digits=10, decimal_places=2, required=False)
    weight = forms.DecimalField(max_digits=10, decimal_places=2, required=False)


class ElementFilterForm(forms.Form):
    status = forms.ChoiceField(choices=ElementStatus.choices, required=False)
    type = forms.ChoiceField(choices=ElementType.choices, required=False)
    location_id = forms.IntegerField(required=False)


class ElementStatusForm(forms.Form):
    status = forms.ChoiceField(choices=ElementStatus.choices)
    location_id = forms.IntegerField(required=False)


class MovementForm(forms.Form):
    """
    Movement payload. The operator is the authenticated user, so an
    operatorId sent by the client is not a field here.
    """

    element_id = forms.IntegerField()
    to_location_id = forms.IntegerField()
    from_location_id = forms.IntegerField(required=False)
    operation = forms.ChoiceField(choices=MovementOperation.choices)
    comments = forms.CharField(required=False)
    photo_url = forms.CharField(max_length=500, required=False)
    latitude = latitude_field()
    longitude = longitude_field()


class LoginForm(forms.Form):
    email = forms.CharField(max_length=254)
    password = forms.CharField()


class RegisterForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(min_length=6)
    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
