"""
Task board web app
------------------
Serves the board UI and a JSON API over an in-memory TaskStore.

HTML:
    GET  /                      → board (?new=1 opens the add modal, ?task=<id> the edit modal)
    POST /tasks                 → create from form, redirect to /
    POST /tasks/<id>            → update from form, redirect to /
    POST /tasks/<id>/delete     → delete, redirect to /

API:
    GET    /api/board           → { columns, total }  (?format=text for plain text)
    GET    /api/tasks           → { tasks, count }    (?status= filter)
    POST   /api/tasks           → { task }, 201
    GET    /api/tasks/<id>      → { task }
    PUT    /api/tasks/<id>      → { task }
    DELETE /api/tasks/<id>      → { deleted }
    GET    /health              → { status, tasks }
"""
import hmac
import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, redirect, render_template, url_for

from .config import BoardConfig
from .form import TaskForm, FormError, TITLE_PLACEHOLDER, DESCRIPTION_PLACEHOLDER
from .render import render, format_board
from .schema import TaskStatus, STATUS_ORDER
from .store import TaskStore, TaskNotFound, seed_tasks

logger = logging.getLogger(__name__)


def create_app(store: Optional[TaskStore] = None, config: Optional[BoardConfig] = None) -> Flask:
    """Build the Flask app around an explicitly owned store."""
    config = config or BoardConfig()
    if store is None:
        store = TaskStore(seed_tasks() if config.seed else None)

    app = Flask(__name__)

    # ── Auth ─────────────────────────────────────────────────────────────────

    def require_api_key(f):
        """Decorator: when api_secret is set, require a matching X-API-Key header."""
        @wraps(f)
        def decorated(*args, **kwargs):
            if not config.api_secret:
                return f(*args, **kwargs)
            provided = request.headers.get("X-API-Key", "").strip()
            if not hmac.compare_digest(provided, config.api_secret):
                code = 401 if not provided else 403
                logger.warning(f"Rejected {request.method} {request.path}: bad API key")
                return jsonify({"error": "Unauthorized"}), code
            return f(*args, **kwargs)
        return decorated

    # ── Errors ───────────────────────────────────────────────────────────────

    def _wants_json() -> bool:
        return request.path.startswith("/api/")

    @app.errorhandler(TaskNotFound)
    def handle_not_found(e: TaskNotFound):
        logger.warning(str(e))
        if _wants_json():
            return jsonify({"error": str(e)}), 404
        return render_template("not_found.html", message=str(e), title=config.board_title), 404

    @app.errorhandler(FormError)
    def handle_form_error(e: FormError):
        logger.warning(f"Invalid task form: {e}")
        if _wants_json():
            return jsonify({"error": str(e)}), 400
        form = TaskForm(
            title=request.form.get("title", ""),
            description=request.form.get("description", ""),
            task_id=request.view_args.get("task_id") if request.view_args else None,
            error=str(e),
        )
        return _board_page(form), 400

    # ── HTML ─────────────────────────────────────────────────────────────────

    def _board_page(form: Optional[TaskForm] = None):
        return render_template(
            "board.html",
            title=config.board_title,
            board=render(store.list()),
            form=form,
            statuses=STATUS_ORDER,
            title_placeholder=TITLE_PLACEHOLDER,
            description_placeholder=DESCRIPTION_PLACEHOLDER,
        )

    @app.route("/")
    def index():
        form = None
        task_id = request.args.get("task", type=int)
        if task_id is not None:
            form = TaskForm.for_task(store.get(task_id))
        elif request.args.get("new"):
            form = TaskForm.blank()
        return _board_page(form)

    @app.route("/tasks", methods=["POST"])
    def create_task():
        TaskForm.from_data(request.form).submit(store)
        return redirect(url_for("index"))

    @app.route("/tasks/<int:task_id>", methods=["POST"])
    def update_task(task_id: int):
        TaskForm.from_data(request.form, task_id=task_id).submit(store)
        return redirect(url_for("index"))

    @app.route("/tasks/<int:task_id>/delete", methods=["POST"])
    def delete_task(task_id: int):
        TaskForm.for_task(store.get(task_id)).delete(store)
        return redirect(url_for("index"))

    # ── API ──────────────────────────────────────────────────────────────────

    def _json_body() -> dict:
        data = request.get_json(force=True, silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FormError(f"Request body must be a JSON object, got {type(data).__name__}")
        return data

    @app.route("/api/board")
    def api_board():
        view = render(store.list())
        if request.args.get("format") == "text":
            return format_board(view), 200, {"Content-Type": "text/plain; charset=utf-8"}
        return jsonify(view.to_dict())

    @app.route("/api/tasks", methods=["GET"])
    def api_tasks():
        tasks = store.list()
        status = request.args.get("status")
        if status:
            try:
                wanted = TaskStatus.from_str(status)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            tasks = [t for t in tasks if t.status == wanted]
        return jsonify({"tasks": [t.to_dict() for t in tasks], "count": len(tasks)})

    @app.route("/api/tasks", methods=["POST"])
    @require_api_key
    def api_create_task():
        data = _json_body()
        task = TaskForm.from_data(data).submit(store)
        return jsonify({"task": task.to_dict()}), 201

    @app.route("/api/tasks/<int:task_id>", methods=["GET"])
    def api_get_task(task_id: int):
        return jsonify({"task": store.get(task_id).to_dict()})

    @app.route("/api/tasks/<int:task_id>", methods=["PUT"])
    @require_api_key
    def api_update_task(task_id: int):
        data = _json_body()
        # Fields left out of the body keep their current values
        current = store.get(task_id).to_dict()
        current.update({k: data[k] for k in ("title", "description", "status") if k in data})
        task = TaskForm.from_data(current, task_id=task_id).submit(store)
        return jsonify({"task": task.to_dict()})

    @app.route("/api/tasks/<int:task_id>", methods=["DELETE"])
    @require_api_key
    def api_delete_task(task_id: int):
        store.delete(task_id)
        return jsonify({"deleted": task_id})

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "tasks": len(store)})

    return app
