from flask import Flask
from .extensions import csrf, db, login_manager, migrate, rq
from .utils.formatting import register_filters


def create_app(config_object='config.Config', **overrides):
    """App factory.

    ``overrides`` are applied on top of ``config_object``; tests use them to
    point at an in-memory database and a temporary storage directory.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    rq.init_app(app)
    register_filters(app)

    @login_manager.user_loader
    def load_user(user_id):
        from .models.user import User
        return db.session.get(User, user_id)

    from .blueprints.auth import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")

    from .blueprints.transcripts import bp as transcripts_bp
    app.register_blueprint(transcripts_bp, url_prefix="/transcripts")

    from .blueprints.upload import bp as upload_bp
    app.register_blueprint(upload_bp, url_prefix="/upload")

    from .blueprints.functions import bp as functions_bp
    # JSON invocation endpoint, called with a session rather than a form
    csrf.exempt(functions_bp)
    app.register_blueprint(functions_bp, url_prefix="/functions")

    @app.get('/')
    def index():
        from flask_login import current_user
        from flask import redirect, url_for, render_template
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login'))

        from .policy import Identity
        from .services.listing import dashboard_stats
        stats = dashboard_stats(Identity.from_user(current_user))
        return render_template('dashboard.html', stats=stats)

    app.logger.debug('App created with storage backend %s', app.config.get('STORAGE_BACKEND'))
    return app
