#!/usr/bin/env python3
"""Application entry point"""
import os

from duecalc import create_app

app = create_app(os.getenv('FLASK_ENV') or 'development')

if __name__ == '__main__':
    # Run the Flask development server
    app.run(host=os.getenv('HOST') or '0.0.0.0',
            port=int(os.getenv('PORT') or 5000),
            debug=app.config.get('DEBUG', False))
