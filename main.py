"""
Flask 애플리케이션 메인 진입점 (블루프린트 구조)
"""
import os

from app import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], port=port, use_reloader=False)
