"""
Declarative authorization.

Handlers load the entity first, then ask ``authorize(session, action,
resource, actor)``. ``actor`` is the caller's Employee record where the
rule depends on employee relationships (claim owner, reporting manager).
"""
from collections import namedtuple

from schemas.enums import ADMIN_ROLES, UserRole
from utils.errors import AuthorizationError

Decision = namedtuple("Decision", ["allowed", "reason"])

ALLOW = Decision(True, None)


def _is_admin(session, resource, actor):
    return session.role in ADMIN_ROLES


def _same_tenant(session, resource):
    if session.role == UserRole.SUPER_ADMIN.value:
        return True
    company_id = getattr(resource, "company_id", None)
    return bool(session.company_id) and company_id == session.company_id


def _claim_owner(session, claim, actor):
    return actor is not None and actor.id == claim.employee_id


def _claim_manager(session, claim, actor):
    owner = claim.employee
    return (
        actor is not None
        and owner is not None
        and owner.reporting_manager_id is not None
        and owner.reporting_manager_id == actor.id
    )


def _workflow_assignee(session, workflow, actor):
    return workflow.assigned_to == session.user_id


def _workflow_creator(session, workflow, actor):
    return workflow.assigned_by == session.user_id


def _any(*checks):
    def check(session, resource, actor):
        return any(c(session, resource, actor) for c in checks)
    return check


def _tenant_only(session, resource, actor):
    return True


# action -> (extra check applied after the tenant rule, reason when denied)
RULES = {
    "tenant:read": (_tenant_only, "Access denied"),
    "tenant:write": (_tenant_only, "Access denied"),
    "claim:view": (_any(_is_admin, _claim_owner, _claim_manager), "Not authorized to view other employees' claims"),
    "claim:update": (_any(_is_admin, _claim_owner), "Access denied"),
    "claim:delete": (_claim_owner, "Only the claim owner can delete this claim"),
    "claim:submit": (_claim_owner, "Only the claim owner can submit this claim"),
    "claim:review": (_claim_manager, "Only the reporting manager can review this claim"),
    "claim:disburse": (_is_admin, "Admin access required"),
    "claim:items": (_any(_is_admin, _claim_owner), "Access denied"),
    "workflow:update": (_any(_is_admin, _workflow_assignee), "You can only update your own workflows"),
    "workflow:delete": (_any(_is_admin, _workflow_creator), "Only workflow creator or admin can delete"),
}


def authorize(session, action, resource, actor=None) -> Decision:
    if session is None:
        return Decision(False, "Authentication required")
    rule = RULES.get(action)
    if rule is None:
        return Decision(False, "Unknown action: %s" % action)
    if resource is None or not _same_tenant(session, resource):
        return Decision(False, "Access denied")
    check, reason = rule
    if not check(session, resource, actor):
        return Decision(False, reason)
    return ALLOW


def enforce(session, action, resource, actor=None, message=None):
    decision = authorize(session, action, resource, actor)
    if not decision.allowed:
        raise AuthorizationError(message or decision.reason)
    return decision
