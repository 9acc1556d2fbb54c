__title__ = "sysexit"
__description__ = "Classify process exit statuses into the sysexits(3) taxonomy"
__url__ = "https://man.openbsd.org/sysexits.3"
__version__ = "1.2.0"
__license__ = "GPLv3"
