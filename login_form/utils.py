"""Shared utilities for the Flask application."""

from flask import request, session

from login_form.controller import FormController, OutcomeModalState

OUTCOME_SESSION_KEY = 'outcome'


def get_form_controller() -> FormController:
    """Build a form controller from the current request and session.
    
    The outcome modal comes from the session; field values and the
    password visibility flag come from the submitted form, if any.
    
    Returns:
        FormController populated for this request.
    """
    controller = FormController(
        outcome=OutcomeModalState.from_value(session.get(OUTCOME_SESSION_KEY)),
        password_visible=request.form.get('show_password') == '1'
    )
    
    for name in FormController.FIELDS:
        if name in request.form:
            controller.update_field(name, request.form[name])
    
    return controller


def store_outcome(controller: FormController) -> None:
    """Persist the controller's modal state in the session.
    
    Args:
        controller: Controller whose outcome should survive a reload.
    """
    if controller.outcome is OutcomeModalState.IDLE:
        session.pop(OUTCOME_SESSION_KEY, None)
    else:
        session[OUTCOME_SESSION_KEY] = controller.outcome.value
