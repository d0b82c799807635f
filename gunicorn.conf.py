"""
Gunicorn configuration for the Visit Rewards API.
"""
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"

# Worker configuration
workers = int(os.getenv('GUNICORN_WORKERS', '2'))
worker_class = 'sync'
worker_connections = 1000
timeout = 60
keepalive = 5

# Logging
accesslog = '-'  # stdout
errorlog = '-'   # stderr
loglevel = os.getenv('LOG_LEVEL', 'info')
capture_output = True

proc_name = 'visitrewards'

preload_app = True

graceful_timeout = 30

wsgi_app = 'run:app'


def on_starting(server):
    server.log.info("Starting Visit Rewards server...")


def on_exit(server):
    server.log.info("Visit Rewards server shutting down...")
