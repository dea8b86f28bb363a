from ..conf import get_setting


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The input format (with its Pandoc extensions) and any extra arguments can
    be overridden with SITECRAFT_PANDOC_FROM and SITECRAFT_PANDOC_EXTRA_ARGS.

    Note: --wrap=none keeps each image on the same line as the text that
    follows it, which the class attribute postprocessor relies on.
    """
    return {
        "format": get_setting("SITECRAFT_PANDOC_FROM"),
        "extra_args": [
            "--wrap=none",
            *get_setting("SITECRAFT_PANDOC_EXTRA_ARGS"),
        ],
    }
