"""Flask application factory for the login form demo."""

import logging
import os
from flask import Flask
from dotenv import load_dotenv

from login_form.config import config

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(config_override=None):
    """Create and configure the Flask application.
    
    Args:
        config_override: Optional configuration dictionary to override defaults.
        
    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)
    
    # Load configuration from environment or default
    env = os.environ.get('FLASK_ENV', 'development')
    app.config.from_object(config.get(env, config['default']))
    
    # Override with provided config
    if config_override:
        app.config.update(config_override)
    
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    
    # Register blueprints
    from login_form.routes import auth
    app.register_blueprint(auth.bp)
    
    logger.debug("Created app with %s configuration", env)
    return app
