import sys
import json
from django.core.management.base import BaseCommand
from django.db import connection, DatabaseError
from django.db.migrations.executor import MigrationExecutor
from django.utils import timezone
from django.conf import settings


class Command(BaseCommand):
    help = "Run internal health checks (DB, migrations, token config) and print a summary for CI/CD pipelines."

    def add_arguments(self, parser):
        parser.add_argument(
            "--db", action="store_true", help="Check database connectivity"
        )
        parser.add_argument(
            "--migrations", action="store_true", help="Fail when migrations are not applied"
        )
        parser.add_argument(
            "--json", action="store_true", help="Output as JSON (default is pretty text)"
        )

    def handle(self, *args, **opts):
        results = {
            "time": timezone.now().isoformat(),
            "debug": bool(settings.DEBUG),
            "ok": True,
            "checks": {},
        }

        # --- Token config is always checked: a missing key breaks every login ---
        jwt = getattr(settings, "SIMPLE_JWT", {})
        if jwt.get("SIGNING_KEY") and jwt.get("ACCESS_TOKEN_LIFETIME"):
            results["checks"]["jwt"] = {"ok": True, "lifetime_s": int(jwt["ACCESS_TOKEN_LIFETIME"].total_seconds())}
        else:
            results["checks"]["jwt"] = {"ok": False, "error": "SIGNING_KEY or ACCESS_TOKEN_LIFETIME missing"}
            results["ok"] = False

        # --- DB check ---
        if opts.get("db"):
            try:
                with connection.cursor() as cur:
                    cur.execute("SELECT 1;")
                    cur.fetchone()
                results["checks"]["db"] = {"ok": True, "vendor": connection.vendor}
            except DatabaseError as e:
                results["checks"]["db"] = {"ok": False, "error": str(e)}
                results["ok"] = False

        # --- Pending migrations ---
        if opts.get("migrations"):
            try:
                executor = MigrationExecutor(connection)
                plan = executor.migration_plan(executor.loader.graph.leaf_nodes())
                pending = [f"{m.app_label}.{m.name}" for m, _ in plan]
                results["checks"]["migrations"] = {"ok": not pending, "pending": pending}
                if pending:
                    results["ok"] = False
            except DatabaseError as e:
                results["checks"]["migrations"] = {"ok": False, "error": str(e)}
                results["ok"] = False

        # --- Output formatting ---
        if opts.get("json"):
            self.stdout.write(json.dumps(results, indent=2))
        else:
            self.stdout.write(f"\n=== HRMS Core Health Check ({results['time']}) ===\n")
            self.stdout.write(f"Debug={results['debug']}\n\n")
            for key, val in results["checks"].items():
                mark = "OK  " if val.get("ok") else "FAIL"
                err = f" ({val.get('error') or val.get('pending')})" if not val.get("ok") else ""
                self.stdout.write(f" [{mark}] {key.upper()}{err}\n")
            self.stdout.write(f"\nOverall: {'OK' if results['ok'] else 'FAILED'}\n")

        # Exit with code 1 on failure (for CI)
        if not results["ok"]:
            sys.exit(1)
