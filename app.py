import os
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS


def create_app(test_config=None):
    load_dotenv()
    app = Flask(__name__)
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'fallback-secret-key')
    app.config['MAX_CONTENT_LENGTH'] = int(os.getenv('MAX_CONTENT_LENGTH', 5 * 1024 * 1024))
    # placeholder for a hosted model; the keyword lookup never reads it
    app.config['GEMINI_API_KEY'] = os.getenv('GEMINI_API_KEY')
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # CORS setup
    origins = os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',')
    CORS(app, origins=origins)

    from routes.form_routes import form_bp
    from routes.advisor_routes import advisor_bp
    app.register_blueprint(form_bp)
    app.register_blueprint(advisor_bp, url_prefix='/api/advisor')

    @app.route('/api')
    def api_index():
        return jsonify({"message": "Agri-Nourish API running"}), 200

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith('/api'):
            return jsonify({"error": "Not found"}), 404
        return e

    @app.errorhandler(413)
    def too_large(e):
        limit = app.config['MAX_CONTENT_LENGTH']
        message = f"Upload exceeds the {limit} byte limit"
        if request.path.startswith('/api'):
            return jsonify({"error": message}), 413
        from routes.form_routes import render_page
        from models import FormInput
        return render_page(FormInput().to_dict(), error=message), 413

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', 5000)), debug=False)
