from cl_rut_lib.utils.sanitiser import sanitise_rut, fully_sanitise_rut
from cl_rut_lib.utils.validators import get_check_digit, validate_rut
from cl_rut_lib.utils.formatter import format_rut, group_thousands
from cl_rut_lib.generator import generate_rut, generate_many_ruts
from cl_rut_lib.data_models.rut import RutParts, split_rut
from cl_rut_lib.data_models.options import GenerateRutOptions, GenerateManyRutOptions
from cl_rut_lib.exceptions import RutError, RutFormatError

__all__ = [
    "sanitise_rut",
    "fully_sanitise_rut",
    "get_check_digit",
    "validate_rut",
    "format_rut",
    "group_thousands",
    "generate_rut",
    "generate_many_ruts",
    "RutParts",
    "split_rut",
    "GenerateRutOptions",
    "GenerateManyRutOptions",
    "RutError",
    "RutFormatError",
]
