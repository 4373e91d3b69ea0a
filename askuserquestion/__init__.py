"""askuserquestion: multiple-choice questions for agents, answered in a native dialog

An agent hands a batch of 1-4 questions to `ask_user_questions`. The batch is
validated, written to a uniquely named request file and shown by a separate
presenter process; whatever the presenter prints is normalized into an
`AskResult` keyed by question header.
"""

# Orchestration
from .ask import ask_user_questions

# Configuration
from .config import DEFAULT_CONFIG_PATH, AskUserConfig, load_config, save_config

# Data structures
from .data_structures import (
    CUSTOM_ANSWER_INDEX,
    MAX_HEADER_LENGTH,
    MAX_OPTIONS,
    MAX_QUESTIONS,
    MIN_OPTIONS,
    MIN_QUESTIONS,
    AnswerValue,
    AskResult,
    AskResultDict,
    BinaryResponseDict,
    Question,
    QuestionAnswer,
    QuestionAnswerDict,
    QuestionDict,
    QuestionOption,
    QuestionOptionDict,
    RawOutcome,
    RequestDict,
    TextContent,
)

# Errors
from .errors import (
    AskUserError,
    BinaryMissing,
    InvalidSpec,
    PlatformUnsupported,
    PresenterFailed,
    ResponseParseError,
    SpawnError,
    TransportWriteError,
)

# Pipeline stages
from .normalize import build_answer_map, normalize_response
from .notification import NOTIFICATION_COMMANDS, notify
from .presenter import Presenter, SubprocessPresenter
from .resolver import (
    BINARY_NAMES,
    SUPPORTED_PLATFORMS,
    current_platform_id,
    resolve_executable,
)
from .schema import Desc, InputSchemaDict, convert_input, schema_from_dataclass

# Tools
from .tools import (
    AskUserQuestionInput,
    AskUserQuestionTool,
    Tool,
    ToolResult,
    get_default_tools,
)
from .transport import (
    read_request_file,
    remove_request_file,
    request_file,
    write_request_file,
)
from .validation import parse_questions, validate_questions

__version__ = "0.1.0"

__all__ = [
    # Orchestration
    "ask_user_questions",
    # Configuration
    "AskUserConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "save_config",
    # Data structures
    "AnswerValue",
    "AskResult",
    "AskResultDict",
    "BinaryResponseDict",
    "CUSTOM_ANSWER_INDEX",
    "MAX_HEADER_LENGTH",
    "MAX_OPTIONS",
    "MAX_QUESTIONS",
    "MIN_OPTIONS",
    "MIN_QUESTIONS",
    "Question",
    "QuestionAnswer",
    "QuestionAnswerDict",
    "QuestionDict",
    "QuestionOption",
    "QuestionOptionDict",
    "RawOutcome",
    "RequestDict",
    "TextContent",
    # Errors
    "AskUserError",
    "BinaryMissing",
    "InvalidSpec",
    "PlatformUnsupported",
    "PresenterFailed",
    "ResponseParseError",
    "SpawnError",
    "TransportWriteError",
    # Pipeline stages
    "validate_questions",
    "parse_questions",
    "current_platform_id",
    "resolve_executable",
    "SUPPORTED_PLATFORMS",
    "BINARY_NAMES",
    "write_request_file",
    "read_request_file",
    "remove_request_file",
    "request_file",
    "Presenter",
    "SubprocessPresenter",
    "normalize_response",
    "build_answer_map",
    "notify",
    "NOTIFICATION_COMMANDS",
    # Schema
    "Desc",
    "InputSchemaDict",
    "convert_input",
    "schema_from_dataclass",
    # Tools
    "Tool",
    "ToolResult",
    "AskUserQuestionTool",
    "AskUserQuestionInput",
    "get_default_tools",
]
