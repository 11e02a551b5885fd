from flask import Flask
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app(config_overrides=None):
    # Validate required environment variables
    required_vars = ['SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var) and not (config_overrides or {}).get(var):
            raise ValueError(f"Required environment variable {var} is not set")

    app = Flask(__name__)
    app.config.from_object('config')
    if config_overrides:
        app.config.update(config_overrides)

    log_level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL; got {log_level!r}")

    # Configure logging
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from morpion.routes.main import main_bp
    from morpion.game.routes import tic_tac_toe_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(tic_tac_toe_bp, url_prefix='/tic-tac-toe')

    # Register CLI commands
    from morpion.commands.game import morpion_cli
    app.cli.add_command(morpion_cli)

    return app
