from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from .geometry import Rect, Viewport
from .model import HierarchyLayout

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _json_body() -> dict:
        payload = request.get_json(silent=True)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        return payload

    def _internal_error(action: str, e: Exception):
        logger.exception("Unexpected error while %s", action)
        if bool(app.config.get("DEBUG", False)):
            return _error(f"Internal Server Error: {e}", 500)
        return _error("Internal Server Error", 500)

    @app.route("/admin/hierarchy", methods=["GET"], endpoint="admin_hierarchy")
    def admin_hierarchy():
        try:
            layout = container.hierarchy_service.get_layout()
        except PersistenceError as e:
            flash(f"Failed to load: {e}", "danger")
            layout = HierarchyLayout.empty()

        everyone = [p for layer in layout.layers for p in layer] + list(layout.unassigned)
        manager_pool = sorted(
            (p for p in everyone if p.role != Role.EMPLOYEE),
            key=lambda p: p.full_name.casefold(),
        )

        return render_template(
            "admin/hierarchy.html",
            layout=layout,
            manager_pool=manager_pool,
            active_page="admin_hierarchy",
        )

    @app.route("/admin/hierarchy/<profile_id>/managers", methods=["POST"], endpoint="admin_hierarchy_assign")
    def admin_hierarchy_assign(profile_id: str):
        try:
            container.hierarchy_service.reassign_managers(
                profile_id=profile_id,
                manager_ids=request.form.getlist("manager_ids"),
            )
            flash("Reporting line updated", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "danger")
        except PersistenceError:
            flash("Failed to update manager", "danger")
        except Exception:
            logger.exception("Unexpected error while updating managers of %s", profile_id)
            flash("Failed to update manager", "danger")

        return redirect(url_for("admin_hierarchy"))

    @app.route("/api/admin/hierarchy", methods=["GET"], endpoint="api_hierarchy")
    def api_hierarchy():
        try:
            layout = container.hierarchy_service.get_layout()
        except PersistenceError as e:
            return _error(f"Failed to load: {e}", 500)
        except Exception as e:
            return _internal_error("building hierarchy", e)
        return jsonify({"success": True, **layout.to_dict()}), 200

    @app.route(
        "/api/admin/hierarchy/<profile_id>/manager-candidates",
        methods=["GET"],
        endpoint="api_manager_candidates",
    )
    def api_manager_candidates(profile_id: str):
        try:
            candidates = container.profile_service.manager_candidates(profile_id=profile_id)
        except ValidationError as e:
            return _error(str(e), 400)
        except PersistenceError as e:
            return _error(f"Failed to load: {e}", 500)
        return jsonify({"success": True, "candidates": [p.to_dict() for p in candidates]}), 200

    @app.route("/api/admin/update-manager", methods=["POST"], endpoint="api_update_manager")
    def api_update_manager():
        try:
            payload = _json_body()
            profile_id = payload.get("employeeId") or payload.get("userId")
            ids = container.profile_service.assign_managers(
                profile_id=profile_id,
                manager_ids=payload.get("managerIds"),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except PersistenceError as e:
            return _error(str(e), 500)
        except Exception as e:
            return _internal_error("updating manager", e)

        return jsonify({"success": True, "message": "Manager updated successfully", "managerIds": ids}), 200

    @app.route("/api/admin/hierarchy/connectors", methods=["POST"], endpoint="api_hierarchy_connectors")
    def api_hierarchy_connectors():
        try:
            payload = _json_body()
            container_rect = Rect.from_dict(payload.get("container") or {})
            raw_rects = payload.get("rects") or {}
            if not isinstance(raw_rects, dict):
                raise ValidationError("rects must be an object keyed by employee id")
            rects = {str(k): Rect.from_dict(v or {}) for k, v in raw_rects.items()}
            viewport = Viewport.from_dict(payload.get("pan"), payload.get("zoom"))

            connectors = container.hierarchy_service.connectors(
                rects=rects,
                container=container_rect,
                viewport=viewport,
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except PersistenceError as e:
            return _error(f"Failed to load: {e}", 500)
        except Exception as e:
            return _internal_error("computing connectors", e)

        return jsonify({"success": True, "lines": [c.to_dict() for c in connectors]}), 200
