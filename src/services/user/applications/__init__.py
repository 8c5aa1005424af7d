from .authenticate_user import AuthenticateUserService as AuthenticateUserService
from .register_user import RegisterUserService as RegisterUserService
