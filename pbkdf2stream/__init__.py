from .version import __version__ as __version__
from .project import project as project

from .derived_key import DerivedKey as DerivedKey
from .encoding import (
    text_to_bytes as text_to_bytes,
    uint_to_big_endian_bytes as uint_to_big_endian_bytes
)
from .exceptions import (
    DerivedKeyTooLongException as DerivedKeyTooLongException,
    InvalidEncodingException as InvalidEncodingException,
    InvalidInputException as InvalidInputException,
    OutOfRangeException as OutOfRangeException,
    PBKDF2Exception as PBKDF2Exception,
    StreamClosedException as StreamClosedException,
    UnknownPRFException as UnknownPRFException
)
from .migrations import InconsistentSerializationException as InconsistentSerializationException
from .models import (
    DerivedKeyModel as DerivedKeyModel,
    PBKDF2ParametersModel as PBKDF2ParametersModel
)
from .pbkdf2 import (
    DEFAULT_ITERATIONS as DEFAULT_ITERATIONS,
    DEFAULT_PRF as DEFAULT_PRF,
    MAX_BLOCK_INDEX as MAX_BLOCK_INDEX,
    MAX_ITERATIONS as MAX_ITERATIONS,
    PRFLike as PRFLike,
    derive as derive,
    derive_key as derive_key,
    f as f,
    resolve_prf as resolve_prf
)
from .prf import PRF as PRF
from .reader import PBKDF2Reader as PBKDF2Reader
from .types import (
    JSONObject as JSONObject,
    JSONType as JSONType,
    PBKDF2Parameters as PBKDF2Parameters,
    PRFCallable as PRFCallable,
    ResolvedPRF as ResolvedPRF,
    StringOrBytes as StringOrBytes
)
