"""Event storm protection, worker heartbeat watchdog and diagnostics reports."""