"""
Account endpoints: login, registration, current user.
"""

from metaltrace import auth
from metaltrace.forms import LoginForm, RegisterForm
from metaltrace.serializers import user_as_dict
from metaltrace.views.base import ApiView


class LoginView(ApiView):
    public = True

    def post(self, request):
        data = self.bind(LoginForm, self.payload())
        user, token = auth.login(data['email'], data['password'])
        return self.json({'user': user_as_dict(user), 'token': token})


class RegisterView(ApiView):
    """Self-service sign-up. New accounts are always customer operators."""

    public = True

    def post(self, request):
        data = self.bind(RegisterForm, self.payload())
        user, token = auth.register(
            email=data['email'],
            password=data['password'],
            first_name=data['first_name'],
            last_name=data['last_name'],
        )
        return self.json({'user': user_as_dict(user), 'token': token}, status=201)


class CurrentUserView(ApiView):
    def get(self, request):
        return self.json(user_as_dict(request.user))
