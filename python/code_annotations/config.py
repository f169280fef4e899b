"""Environment configuration constants."""


class AnnotationEnvVars:
    """Environment variable names read by code_annotations."""

    CODE_ANNOTATIONS_LOG_LEVEL = "CODE_ANNOTATIONS_LOG_LEVEL"
    LOG_LEVEL = "LOG_LEVEL"


class AnnotationDefaults:
    """Default values."""

    LOG_LEVEL = "ERROR"
    LOGGER_NAME = "code_annotations"


# Environment variable configuration mapping
ANNOTATION_ENV_CONFIG = {
    AnnotationEnvVars.CODE_ANNOTATIONS_LOG_LEVEL: {
        "default": AnnotationDefaults.LOG_LEVEL,
        "description": "Log level for the code_annotations logger (default: ERROR)",
    },
    AnnotationEnvVars.LOG_LEVEL: {
        "default": AnnotationDefaults.LOG_LEVEL,
        "description": "Fallback log level when CODE_ANNOTATIONS_LOG_LEVEL is unset",
    },
}
