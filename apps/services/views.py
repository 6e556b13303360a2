from django.shortcuts import render

from .catalog import SERVICES


def services_index(request):
    """Catalog of available cleaning services."""
    return render(request, 'services.html', {'services': SERVICES})
