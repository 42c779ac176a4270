import logging
from pathlib import Path

# Import configuration management
import sys
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager

from flask import (
    Flask,
    render_template_string,
    jsonify,
)
from werkzeug.middleware.proxy_fix import ProxyFix

from summarizer import create_llm_provider
from summarizer.models import ACCEPTED_MEDIA_TYPES
from app.utils import get_workspace_id, attach_workspace_cookie

logger = logging.getLogger(__name__)

UI_DIR = Path(__file__).parent.parent / "ui"

# Room for a full upload batch plus the multipart envelope
REQUEST_OVERHEAD_BYTES = 1024 * 1024


def create_app(client=None, config_manager: ConfigManager = None) -> Flask:
    """Build the Flask application.

    Args:
        client: Remote generative capability; built from the LLM config when omitted
        config_manager: Configuration source; a default ConfigManager when omitted

    Returns:
        Configured Flask application
    """
    config_manager = config_manager or ConfigManager()
    app_config = config_manager.get_app_config()
    upload_config = config_manager.get_upload_config()
    chat_config = config_manager.get_chat_config()

    if client is None:
        llm_config = config_manager.get_llm_config()
        client = create_llm_provider(llm_config)
        logger.info(f"Using {llm_config.provider} provider with model {llm_config.model}")

    app = Flask(__name__, template_folder='../ui', static_folder='../ui')
    app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
            x_host  = 1,     # trust 1 hop for X-Forwarded-Host
            x_prefix= 1)     # honour X-Forwarded-Prefix
    app.config["MAX_CONTENT_LENGTH"] = (
        upload_config.max_files * upload_config.max_file_size_mb * 1024 * 1024
        + REQUEST_OVERHEAD_BYTES
    )

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------

    from app.summarize.factory import create_summarize_module
    from app.chat.factory import create_chat_module
    from app.export.factory import create_export_module

    summarize_module = create_summarize_module(
        client,
        upload_config=upload_config,
        max_age_hours=app_config.session_max_age_hours,
    )
    chat_module = create_chat_module(
        client,
        chat_config=chat_config,
        max_age_hours=app_config.session_max_age_hours,
    )
    export_module = create_export_module()

    app.register_blueprint(summarize_module["blueprint"])
    app.register_blueprint(chat_module["blueprint"])
    app.register_blueprint(export_module["blueprint"])

    app.extensions["summarizer"] = {
        "client": client,
        "summarize": summarize_module,
        "chat": chat_module,
        "export": export_module,
    }

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    index_template = (UI_DIR / "index.html").read_text(encoding="utf-8")

    @app.route("/")
    def index():
        """Render the summarizer page."""
        sid, is_new = get_workspace_id()
        html = render_template_string(
            index_template,
            accept=",".join([".txt", ".pdf", ".jpg", ".jpeg", ".png"] + sorted(ACCEPTED_MEDIA_TYPES)),
            max_files=upload_config.max_files,
            max_file_size_mb=upload_config.max_file_size_mb,
        )
        response = app.make_response(html)
        return attach_workspace_cookie(response, sid, is_new)

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools and cloud platforms."""
        return jsonify({
            "status": "UP",
            "service": "legal-financial-summarizer"
        }), 200

    @app.errorhandler(413)
    def request_too_large(e):
        return jsonify({
            "success": False,
            "error": (
                f"Upload is too large. At most {upload_config.max_files} files of "
                f"{upload_config.max_file_size_mb} MB each are accepted."
            )
        }), 413

    return app

