from . import healthcheck, tracker, version
