import logging

auth_logger = logging.getLogger("httpauth.auth")
digest_logger = logging.getLogger("httpauth.digest")
