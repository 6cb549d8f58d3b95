import logging
from datetime import datetime, timezone

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from a11y_auditor import facade
from a11y_auditor.model import ToolParameters

logger = logging.getLogger(__name__)

tool_router = Blueprint('tool_router', __name__)

# Tool name -> element category checked by that tool
TOOL_CATEGORIES = {
    "check-nav-accessibility": "nav",
    "check-dropdown-accessibility": "dropdown",
}

TOOL_DESCRIPTIONS = {
    "check-nav-accessibility": "Check navigation elements for accessibility compliance (WCAG guidelines)",
    "check-dropdown-accessibility": "Check dropdown buttons for proper ARIA attributes and accessibility compliance",
}


def _input_schema(subject: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "mode": {
                "type": "string",
                "enum": ["realtime", "on-demand"],
                "description": "Analysis mode - realtime for live checking, on-demand for explicit calls",
                "default": "on-demand",
            },
            "content": {
                "type": "string",
                "description": f"HTML content to analyze for {subject} accessibility",
            },
            "notificationType": {
                "type": "string",
                "enum": ["diagnostic", "notification", "inline"],
                "description": "Type of notification format for results",
                "default": "diagnostic",
            },
            "provideSuggestions": {
                "type": "boolean",
                "description": "Whether to include fix suggestions and example code",
                "default": True,
            },
        },
        "required": ["content"],
    }


def _error_response(message: str, status: int):
    return jsonify({
        "content": [{"type": "text", "text": f"❌ Error: {message}"}],
        "isError": True,
    }), status


# --- ROUTES ---

@tool_router.route('/health', methods=['GET'])
def health():
    """Liveness probe for the host process."""
    return jsonify({"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()})


@tool_router.route('/api/tools', methods=['GET'])
def list_tools():
    """Lists the available checking tools and their argument schema."""
    tools = []
    for name, category in TOOL_CATEGORIES.items():
        subject = "navigation" if category == "nav" else "dropdown"
        tools.append({
            "name": name,
            "description": TOOL_DESCRIPTIONS[name],
            "inputSchema": _input_schema(subject),
        })
    return jsonify({"tools": tools})


@tool_router.route('/api/tools/<name>', methods=['POST'])
def call_tool(name: str):
    """
    Runs one checking tool on the posted markup.
    Returns the formatted report as text content plus the raw result.
    """
    category = TOOL_CATEGORIES.get(name)
    if category is None:
        return _error_response(f"Unknown tool: {name}", 404)

    args = request.get_json(silent=True)
    if not isinstance(args, dict) or not isinstance(args.get("content"), str):
        return _error_response("Content parameter is required and must be a string", 400)

    try:
        params = ToolParameters.model_validate(args)
    except ValidationError as e:
        logger.debug("Rejected arguments for %s: %s", name, e)
        return _error_response(str(e), 400)

    result = facade.check(category, params.content, params.to_options())
    text = facade.format_result(result, params.notification_type)

    return jsonify({
        "content": [{"type": "text", "text": text}],
        "result": result.model_dump(),
        "isError": False,
    })
