from flask import Blueprint, g

from schemas.workflow import WorkflowCreate, WorkflowUpdate
from services import workflows as workflow_service
from utils.decorators import token_required
from utils.responses import ok, serialize_all
from utils.validators import parse_body

workflows_bp = Blueprint("workflows", __name__)


@workflows_bp.route("", methods=["GET"])
@token_required
def list_workflows():
    return ok(serialize_all(workflow_service.list_workflows(g.session)))


@workflows_bp.route("/<workflow_id>", methods=["GET"])
@token_required
def get_workflow(workflow_id):
    return ok(workflow_service.get_workflow(g.session, workflow_id).to_dict())


@workflows_bp.route("", methods=["POST"])
@token_required
def create_workflow():
    workflow = workflow_service.create_workflow(g.session, parse_body(WorkflowCreate))
    return ok(workflow.to_dict(), 201)


@workflows_bp.route("/<workflow_id>", methods=["PATCH", "PUT"])
@token_required
def update_workflow(workflow_id):
    workflow = workflow_service.update_workflow(g.session, workflow_id, parse_body(WorkflowUpdate))
    return ok(workflow.to_dict())


@workflows_bp.route("/<workflow_id>", methods=["DELETE"])
@token_required
def delete_workflow(workflow_id):
    workflow_service.delete_workflow(g.session, workflow_id)
    return ok({"success": True})
