"""Routes for a paginated CRUD list page.

One ``CrudPage`` describes an entity screen (service calls, table, form,
messages); ``register_crud`` wires the three routes every such screen has:

- ``GET  /<slug>``                 list, with optional create/edit modal or delete prompt
- ``POST /<slug>/save``            create or update from the modal
- ``POST /<slug>/<id>/delete``     delete after confirmation

Modal and prompt state travel in the query string (``modal=create``,
``edit_id=<id>``, ``confirm_delete=<id>``). After any mutation the browser
is redirected back to the same page so the list is refetched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..api.pagination import Page
from ..core.enums import ModalMode, ValidPage
from ..core.exceptions import ApiError, ValidationError
from .modals import DeleteConfirmation, EntityFormModal, InFlightRegistry
from .page_controller import ListController
from .table import DataTable, PaginationData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrudPage:
    slug: str
    page: ValidPage
    entity_label: str
    plural_label: str
    form_template: str
    list_page: Callable[..., Page]
    delete: Callable[[int], Any]
    make_table: Callable[[], DataTable]
    make_form: Callable[[], EntityFormModal]
    draft_from_form: Callable[[Mapping[str, Any]], Any]
    display_name: Callable[[Any], str]
    delete_message: Callable[[Any], str]

    @property
    def list_endpoint(self) -> str:
        return f"{self.slug}_list"


def _int_or_none(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def register_crud(app: Flask, page: CrudPage, *, in_flight: InFlightRegistry) -> None:
    def _controller(args: Mapping[str, Any]) -> ListController:
        return ListController.from_request_args(
            args,
            lambda p, n, _f: page.list_page(page=p, per_page=n),
            default_per_page=int(app.config["DEFAULT_PER_PAGE"]),
            per_page_options=list(app.config["PER_PAGE_OPTIONS"]),
            error_message="Failed to fetch data",
        )

    def _find(ctrl: ListController, entity_id: int):
        if ctrl.data is None:
            return None
        return next((e for e in ctrl.data.items if getattr(e, "id", None) == entity_id), None)

    def _delete_key(entity_id: int) -> tuple[str, int]:
        return (page.slug, int(entity_id))

    def _render(
        ctrl: ListController,
        *,
        modal: Optional[EntityFormModal] = None,
        confirmation: Optional[DeleteConfirmation] = None,
        delete_id: Optional[int] = None,
    ):
        g.navigation.set_page_active(page.page)
        data: Optional[Page] = ctrl.data
        pagination = PaginationData.from_page(data) if data is not None else None
        table = page.make_table().build(
            list(data.items) if data is not None else [],
            pagination=pagination,
            loading=ctrl.loading,
            error=ctrl.error,
            title=f"Total {data.total if data is not None else 0} {page.plural_label}",
            add_label=f"Add {page.entity_label}",
            add_url=url_for(page.list_endpoint, **ctrl.query(modal="create")),
            url_for=url_for,
            list_endpoint=page.list_endpoint,
            link_params=ctrl.query(),
        )
        return render_template(
            "crud/index.html",
            crud=page,
            table=table,
            modal=modal,
            form_template=page.form_template,
            confirmation=confirmation,
            delete_id=delete_id,
            query=ctrl.query(),
            close_url=url_for(page.list_endpoint, **ctrl.query()),
        )

    def list_view():
        ctrl = _controller(request.args)
        ctrl.refresh()

        modal = None
        if request.args.get("modal") == ModalMode.CREATE.value:
            modal = page.make_form()
            modal.open(ModalMode.CREATE)

        edit_id = _int_or_none(request.args.get("edit_id"))
        if edit_id is not None:
            target = _find(ctrl, edit_id)
            if target is None:
                flash(f"{page.entity_label} not found", "warning")
            else:
                modal = page.make_form()
                modal.open(ModalMode.EDIT, target)

        confirmation = None
        delete_id = _int_or_none(request.args.get("confirm_delete"))
        if delete_id is not None:
            target = _find(ctrl, delete_id)
            if target is None:
                flash(f"{page.entity_label} not found", "warning")
                delete_id = None
            else:
                name = page.display_name(target)
                confirmation = DeleteConfirmation(
                    title=f"Delete {page.entity_label}",
                    message=page.delete_message(target),
                    item_name=name,
                    loading=in_flight.is_held(_delete_key(delete_id)),
                )
                confirmation.open()

        return _render(ctrl, modal=modal, confirmation=confirmation, delete_id=delete_id)

    def save_view():
        ctrl = _controller(request.form)
        try:
            mode = ModalMode(request.form.get("mode") or ModalMode.CREATE.value)
        except ValueError:
            mode = ModalMode.CREATE

        modal = page.make_form()
        modal.restore(mode, page.draft_from_form(request.form), _int_or_none(request.form.get("id")))

        verb = "updated" if mode == ModalMode.EDIT else "created"
        try:
            if modal.submit(on_success=lambda: flash(f"{page.entity_label} {verb} successfully", "success")):
                return redirect(url_for(page.list_endpoint, **ctrl.query()))
        except ValidationError as e:
            modal.errors.update(e.errors)
            flash(str(e), "danger")
        except ApiError as e:
            flash(e.message, "danger")
        except Exception:
            logger.exception("Error saving %s", page.slug)
            flash(f"System error while saving {page.entity_label.lower()}", "danger")

        ctrl.refresh()
        return _render(ctrl, modal=modal)

    def delete_view(entity_id: int):
        ctrl = _controller(request.form)
        key = _delete_key(entity_id)
        acquired = in_flight.acquire(key)
        confirmation = DeleteConfirmation(title=f"Delete {page.entity_label}", loading=not acquired)
        confirmation.open()
        try:
            if confirmation.confirm(lambda: page.delete(entity_id)):
                flash(f"{page.entity_label} deleted successfully", "success")
            else:
                flash("Delete already in progress", "warning")
        except ApiError as e:
            flash(e.message, "danger")
        except Exception:
            logger.exception("Error deleting %s %s", page.slug, entity_id)
            flash(f"System error while deleting {page.entity_label.lower()}", "danger")
        finally:
            if acquired:
                in_flight.release(key)

        return redirect(url_for(page.list_endpoint, **ctrl.query()))

    app.add_url_rule(f"/{page.slug}", endpoint=page.list_endpoint, view_func=list_view)
    app.add_url_rule(f"/{page.slug}/save", endpoint=f"{page.slug}_save", view_func=save_view, methods=["POST"])
    app.add_url_rule(
        f"/{page.slug}/<int:entity_id>/delete",
        endpoint=f"{page.slug}_delete",
        view_func=delete_view,
        methods=["POST"],
    )
