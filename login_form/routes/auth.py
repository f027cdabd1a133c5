"""Login form routes."""

from flask import Blueprint, render_template, request, redirect, url_for, jsonify

from login_form.controller import FormController
from login_form.utils import get_form_controller, store_outcome

bp = Blueprint('auth', __name__)

TOGGLE_PASSWORD_ACTION = 'toggle_password'


@bp.route('/')
def index():
    """Redirect to the login form."""
    return redirect(url_for('auth.login'))


@bp.route('/login', methods=['GET', 'POST'])
def login():
    """Render the login form and handle submissions."""
    controller = get_form_controller()
    
    if request.method == 'POST':
        if request.form.get('action') == TOGGLE_PASSWORD_ACTION:
            controller.toggle_password_visibility()
        else:
            controller.submit()
            store_outcome(controller)
    
    return render_template('login.html', controller=controller)


@bp.route('/login/dismiss', methods=['POST'])
def dismiss():
    """Close the open outcome dialog."""
    controller = get_form_controller()
    controller.dismiss_modal()
    store_outcome(controller)
    return redirect(url_for('auth.login'))


@bp.route('/api/password-criteria', methods=['POST'])
def password_criteria():
    """Return live criteria feedback for a password being typed."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        password = payload.get('password')
    else:
        password = request.form.get('password')
    
    if not isinstance(password, str):
        password = ''
    
    controller = FormController()
    controller.update_field('password', password)
    
    return jsonify({
        'visible': controller.criteria_visible,
        'criteria': controller.criteria.as_dict(),
        'items': [
            {'label': label, 'met': met}
            for label, met in controller.criteria_items()
        ],
    })
