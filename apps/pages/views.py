from django.conf import settings
from django.shortcuts import render

from apps.services.catalog import SERVICES

FOUNDER = {
    'name': 'Tania Intriago',
    'role': 'Founder & Head Cleaner',
    'bio': (
        'With years of experience, I founded SparkleClean from a passion for making homes '
        'and workplaces fresh, vibrant, and healthy. To me, cleaning isn\'t just a service; '
        'it\'s about creating a sparkle that brings comfort, clarity, and joy.'
    ),
    'image_url': 'https://res.cloudinary.com/dfsebl7h3/image/upload/v1759510067/TaniaIntriago_skjgum.jpg',
}


def home(request):
    """Landing page with service highlights and a shareable site link."""
    return render(request, 'index.html', {
        'services': SERVICES[:6],
        'share_url': request.build_absolute_uri('/'),
    })


def about(request):
    """Our story and the founder."""
    return render(request, 'about.html', {'founder': FOUNDER})


def contact(request):
    """Phone contact for questions and quotes."""
    return render(request, 'contact.html', {
        'founder': FOUNDER,
        'phone': settings.BUSINESS_PHONE,
    })


def error_404(request, exception=None):
    return render(request, 'errors/404.html', status=404)


def error_500(request):
    return render(request, 'errors/500.html', status=500)


def error_403(request, exception=None):
    return render(request, 'errors/403.html', status=403)
