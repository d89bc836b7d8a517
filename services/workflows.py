from datetime import datetime

from flask import current_app

import storage
from models import db
from schemas.enums import UserRole, WorkflowStatus
from schemas.workflow import EMPLOYEE_EDITABLE_FIELDS
from utils.errors import AuthorizationError, NotFoundError, ValidationError
from utils.policy import enforce
from utils.scoping import is_admin, require_company_id

REQUIRED_FIELDS = ("title", "type", "assigned_to", "deadline", "priority", "status", "progress")


def _get_workflow(session, workflow_id):
    workflow = storage.workflows.get(workflow_id)
    if workflow is None:
        raise NotFoundError("Workflow not found")
    enforce(session, "tenant:read", workflow)
    return workflow


def _check_assignee(company_id, user_id):
    user = storage.users.get(user_id)
    if user is None or user.company_id != company_id:
        raise ValidationError("Assigned user must belong to the same company")


def _apply_completion(workflow, new_status):
    """completedAt follows the status: stamped on entering completed, cleared on leaving it."""
    if new_status is None or new_status == workflow.status:
        return
    if new_status == WorkflowStatus.COMPLETED.value:
        workflow.completed_at = datetime.utcnow()
    elif workflow.status == WorkflowStatus.COMPLETED.value:
        workflow.completed_at = None


def list_workflows(session):
    if is_admin(session):
        if session.role == UserRole.SUPER_ADMIN.value and not session.company_id:
            return storage.workflows.all()
        return storage.workflows.get_by_company(session.company_id)
    return [w for w in storage.workflows.get_by_assignee(session.user_id)
            if w.company_id == session.company_id]


def get_workflow(session, workflow_id):
    return _get_workflow(session, workflow_id)


def create_workflow(session, data):
    if not is_admin(session):
        raise AuthorizationError("Only admins and managers can create workflows")
    company_id = require_company_id(data.company_id)
    _check_assignee(company_id, data.assigned_to)

    fields = data.columns(exclude=("company_id",))
    workflow = storage.workflows.create(company_id=company_id, assigned_by=session.user_id, **fields)
    if workflow.status == WorkflowStatus.COMPLETED.value:
        workflow.completed_at = datetime.utcnow()
    db.session.commit()
    current_app.logger.info("Workflow %s assigned to %s", workflow.id, workflow.assigned_to)
    return workflow


def update_workflow(session, workflow_id, data):
    workflow = _get_workflow(session, workflow_id)
    enforce(session, "workflow:update", workflow)

    fields = data.fields_set(not_null=REQUIRED_FIELDS)
    if not is_admin(session):
        # anything else an employee sends is ignored
        fields = {k: v for k, v in fields.items() if k in EMPLOYEE_EDITABLE_FIELDS}
    if "assigned_to" in fields:
        _check_assignee(workflow.company_id, fields["assigned_to"])

    _apply_completion(workflow, fields.get("status"))
    for key, value in fields.items():
        setattr(workflow, key, value)
    db.session.commit()
    return workflow


def delete_workflow(session, workflow_id):
    workflow = _get_workflow(session, workflow_id)
    enforce(session, "workflow:delete", workflow)
    storage.workflows.delete(workflow.id)
    db.session.commit()
    return True
