class Constants:
    DISCOVERY = "discovery"
    EXTENSION = "extension"
    EXCLUDE_DIRS = "exclude_dirs"
    OUTPUT = "output"
    EXTRACTOR = "extractor"
    KIND = "kind"
    COMMAND = "command"
    PROMPT_PATH = "prompt_path"
    FILE_LABEL = "file_label"
    PREVIEW_CHARS = "preview_chars"
    LOGGING = "logging"
    FORMAT = "format"
    DATEFMT = "datefmt"
    # Environment overrides (also read from .env)
    VERBOSE_ENV = "VERBOSE"
    COMMAND_ENV = "EXTRACTOR_COMMAND"
