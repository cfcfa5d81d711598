# main.py
import subprocess
import sys

from logger import log

def main():
    from system.preflight import PreconditionError, check_preconditions
    try:
        check_preconditions()
    except PreconditionError as e:
        log.error("Precondition failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    from app import DgraphWizard
    app = DgraphWizard()
    cfg = app.run()
    if app.return_code:
        log.error("Wizard stopped with return code %s", app.return_code)
        print("ERROR: the wizard stopped unexpectedly. Nothing was installed.",
              file=sys.stderr)
        sys.exit(app.return_code)
    if cfg is None:
        log.info("Nothing installed")
        print("Install cancelled. Nothing was changed.")
        sys.exit(0)

    from installer import Installer
    try:
        Installer(cfg).run()
    except (subprocess.CalledProcessError, OSError) as e:
        log.error("Install failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)

if __name__ == "__main__":
    main()
