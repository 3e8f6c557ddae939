from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.core.management.base import BaseCommand, CommandError

from core.conf import get_navigation_settings
from core.expansion import ExpansionState
from core.navigation import resolve_navigation
from core.paths import normalize
from core.permissions import permission_set_for_user


class Command(BaseCommand):
    help = "Mostra o menu que um usuário enxerga em determinada página"

    def add_arguments(self, parser):
        parser.add_argument("--email", help="Email do usuário; omitido = visitante anônimo")
        parser.add_argument("--path", default="/", help="Página atual")

    def handle(self, *args, **options):
        User = get_user_model()
        email = options.get("email")
        if email:
            try:
                user = User.objects.get(email__iexact=email)
            except User.DoesNotExist as exc:
                raise CommandError(f"Usuário {email} não encontrado") from exc
        else:
            user = AnonymousUser()

        location = normalize(options["path"])
        menu = resolve_navigation(
            get_navigation_settings().menu,
            permission_set_for_user(user),
            location,
            ExpansionState(),
        )
        if not menu:
            self.stdout.write("(menu vazio)")
            return

        for node in menu:
            if node.kind == "link":
                self.stdout.write(f"{'*' if node.is_active else ' '} {node.label} ({node.href})")
                continue
            marker = "-" if node.is_open else "+"
            self.stdout.write(f"{marker} {node.title}")
            if node.is_open:
                for item in node.items:
                    self.stdout.write(f"  {'*' if item.is_active else ' '} {item.label} ({item.href})")
