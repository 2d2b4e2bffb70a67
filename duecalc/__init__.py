"""Application factory and initialization"""
from flask import Flask, flash, render_template, request
from flask_wtf.csrf import CSRFError, CSRFProtect
from config import config

csrf = CSRFProtect()

def create_app(config_name='default'):
    """Create and configure the Flask application"""
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from duecalc.calculators import calculators_bp

    app.register_blueprint(calculators_bp, url_prefix='/')

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html', title='Không tìm thấy trang'), 404

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        app.logger.warning('CSRF check failed on %s: %s', request.path, error.description)
        flash('Phiên làm việc đã hết hạn, vui lòng thử lại.', 'warning')
        return render_template('errors/400.html', title='Yêu cầu không hợp lệ',
                               reason=error.description), 400

    # Context processor for global variables
    @app.context_processor
    def inject_settings():
        from duecalc.core import CALCULATORS
        from duecalc.utils.helpers import format_currency
        return dict(
            app_name=app.config['APP_NAME'],
            calculators=CALCULATORS.values(),
            format_currency=format_currency,
        )

    return app
