"""
URL configuration for the SparkleClean website.
"""
from django.conf import settings
from django.urls import path, include

urlpatterns = [
    path('', include('apps.pages.urls', namespace='pages')),
    path('services/', include('apps.services.urls', namespace='services')),
    path('bookings/', include('apps.bookings.urls', namespace='bookings')),
    path('dashboard/', include('apps.dashboard.urls', namespace='dashboard')),
]

# Custom Error Handlers
handler404 = 'apps.pages.views.error_404'
handler500 = 'apps.pages.views.error_500'
handler403 = 'apps.pages.views.error_403'

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [path('__debug__/', include(debug_toolbar.urls))] + urlpatterns
