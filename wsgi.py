# For gunicorn: gunicorn --preload wsgi:app (schema upgrade runs once in the master)
from storefront.app import create_app

app = create_app()
