#!/usr/bin/env python
"""
Show or switch the site mode from the command line, without going through
HTTP (and so never through the gate).

    tools/set_site_mode.py                 # show status
    tools/set_site_mode.py maintenance     # block visitors with the maintenance page
    tools/set_site_mode.py online --site 2
"""
import os, sys, argparse
from pathlib import Path

# put the project root on sys.path
BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

import django
django.setup()

from django.contrib.sites.models import Site

from core.modes import SWITCH_TARGETS, get_settings
from core.store import current_tenant_id, get_store
from core.switch import switch_mode


def show(settings, site_id):
    print(f"site {site_id}: {settings.status.label} "
          f"(enabled={int(settings.enabled)}, template={settings.mode})")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Site mode: Online / Manutenção / Desenvolvimento")
    parser.add_argument("target", nargs="?", choices=SWITCH_TARGETS,
                        help="switch to this mode; omit to only show the status")
    parser.add_argument("--site", type=int, default=None,
                        help="site id (default: SITE_ID)")
    args = parser.parse_args(argv)

    if args.site is not None and not Site.objects.filter(pk=args.site).exists():
        parser.error(f"site {args.site} does not exist")
    site_id = args.site if args.site is not None else current_tenant_id()
    store = get_store()

    if args.target is None:
        show(get_settings(store, site_id), site_id)
        return 0

    show(switch_mode(store, site_id, args.target), site_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
