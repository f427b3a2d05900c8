import os

# App: each worker owns its own in-memory flag store
wsgi_app = "app:create_app()"

# Bind / workers / threads
bind = os.getenv("BIND", "0.0.0.0:3000")
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
threads = int(os.getenv("WEB_THREADS", "4"))

# Worker class & timeouts
worker_class = "gthread"
timeout = int(os.getenv("WEB_TIMEOUT", "30"))
graceful_timeout = int(os.getenv("WEB_GRACEFUL_TIMEOUT", "10"))
keepalive = int(os.getenv("WEB_KEEPALIVE", "5"))

# Logging
loglevel = os.getenv("LOG_LEVEL", "info").lower()
accesslog = "-"   # stdout
errorlog = "-"    # stderr

# stores are built per worker
preload_app = False

def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)

def when_ready(server):
    server.log.info("Flag service ready on %s", bind)
