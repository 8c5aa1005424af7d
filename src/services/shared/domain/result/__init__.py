from .access_result import AccessResult as AccessResult
from .access_result import Forbidden as Forbidden
from .access_result import NotFound as NotFound
from .access_result import Success as Success
from .validation_result import Invalid as Invalid
from .validation_result import Valid as Valid
from .validation_result import ValidationResult as ValidationResult
