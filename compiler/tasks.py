"""
Celery tasks for compiling documents in the background.

Every stage of the compiler is pure, so independent documents can be compiled
in parallel with one task per document and no extra synchronisation.

To use Celery, you need to:
1. Install celery: pip install celery redis
2. Configure celery in settings.py (CELERY_BROKER_URL, ...)
3. Run celery worker: celery -A SiteCraft worker -l info
"""

import logging

from celery import group, shared_task

from .exceptions import FrontmatterError

logger = logging.getLogger(__name__)


@shared_task
def compile_document_async(content):
    """
    Compile one document asynchronously.

    Args:
        content: Full document text, front matter included

    Returns:
        Dict with the flattened front matter and the compiled HTML
    """
    from .markdown.renderer import compile_document

    try:
        document = compile_document(content)
    except FrontmatterError as e:
        logger.warning("Skipping document with invalid front matter: %s", e)
        return {"success": False, "error": str(e)}
    except Exception as e:
        logger.error("Document compilation failed: %s", e, exc_info=True)
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "frontmatter": document.frontmatter.as_string_map(),
        "html": document.html,
        "accessibility_errors": document.accessibility_errors,
    }


def compile_documents_async(documents):
    """
    Fan out one ``compile_document_async`` task per document.

    Returns:
        GroupResult; ``.get()`` yields results in input order
    """
    return group(compile_document_async.s(content) for content in documents).apply_async()
