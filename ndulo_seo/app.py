import logging
import os

from flask import Flask, current_app, send_from_directory
from werkzeug.exceptions import NotFound

from ndulo_seo.meta_catalog import blog_metadata, home_metadata
from ndulo_seo.meta_injector import inject_meta_tags, script_safe

logger = logging.getLogger(__name__)

HOST = '0.0.0.0'
PORT = 3010

DEFAULT_PUBLIC_DIR = 'public'


def create_app(test_config=None):
    settings = {'PUBLIC_DIR': DEFAULT_PUBLIC_DIR}
    if test_config:
        settings.update(test_config)

    # Build artifacts live outside the package; resolve against the cwd.
    public_dir = os.path.abspath(settings['PUBLIC_DIR'])
    settings['PUBLIC_DIR'] = public_dir
    settings['ASSETS_DIR'] = os.path.abspath(
        settings.get('ASSETS_DIR') or os.path.join(public_dir, 'assets'))
    settings['INDEX_TEMPLATE'] = os.path.abspath(
        settings.get('INDEX_TEMPLATE') or os.path.join(public_dir, 'index.html'))

    # /assets/* goes through Flask's static route: missing files are a plain 404
    app = Flask(__name__, static_folder=settings['ASSETS_DIR'], static_url_path='/assets')
    app.config.from_mapping(settings)
    app.add_template_filter(script_safe)

    @app.get('/')
    def index():
        return inject_meta_tags(home_metadata())

    @app.get('/blog/<blog_id>')
    def blog_detail(blog_id):
        return inject_meta_tags(blog_metadata(blog_id))

    @app.get('/<path:path>')
    def spa_fallback(path):
        # Unknown paths belong to the client router: hand back the untouched index.
        public = current_app.config['PUBLIC_DIR']
        try:
            return send_from_directory(public, path)
        except NotFound:
            return send_from_directory(public, 'index.html')

    return app


app = create_app()


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logger.info('📍 http://localhost:%d', PORT)
    app.run(host=HOST, port=PORT, threaded=True)


if __name__ == '__main__':
    main()
