from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect
from redis import Redis
from rq import Queue
from flask import current_app

# job kwargs understood by RQ but not by the job function itself
RQ_KEYS = {'job_timeout', 'timeout', 'at_front', 'depends_on', 'result_ttl', 'ttl', 'meta', 'description'}


class RQWrapper:
    def __init__(self):
        self.redis = None
        self.queue = None

    def init_app(self, app):
        if not app.config.get("RQ_ASYNC", True):
            self.redis = None
            self.queue = None
            return
        try:
            self.redis = Redis.from_url(app.config.get("REDIS_URL"))
            self.queue = Queue("default", connection=self.redis)
        except Exception:
            # no Redis configured/reachable: run jobs synchronously instead
            app.logger.exception('Redis/RQ init failed, falling back to sync execution')
            self.redis = None
            self.queue = None

    def _run_inline(self, args, kwargs):
        func = args[0]
        safe_kwargs = {k: v for k, v in kwargs.items() if k not in RQ_KEYS}
        return func(*args[1:], **safe_kwargs)

    def enqueue(self, *args, **kwargs):
        """Enqueue a job on RQ, or run it inline when no queue is available.

        Inline execution propagates the job's exceptions so the caller can
        tell a failed invocation from a successful one.
        """
        if not self.queue:
            return self._run_inline(args, kwargs)

        try:
            return self.queue.enqueue(*args, **kwargs)
        except Exception:
            current_app.logger.exception('RQ enqueue failed, falling back to sync execution')
            return self._run_inline(args, kwargs)


db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()
csrf = CSRFProtect()
rq = RQWrapper()
