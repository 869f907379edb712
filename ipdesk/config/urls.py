"""
URL configuration for the ipdesk project.

Every app mounts its routes under /api/v1/.
"""
from django.contrib import admin
from django.urls import path, include, re_path
from django.conf import settings
from django.views.static import serve

admin.site.site_header = "IP Desk Admin Panel"
admin.site.site_title = "IP Desk Admin Portal"
admin.site.index_title = "IP management back office"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('ipdesk.core.urls')),
    path('api/v1/', include('ipdesk.locations.urls')),
    path('api/v1/', include('ipdesk.parties.urls')),
    path('api/v1/', include('ipdesk.orders.urls')),
    path('api/v1/', include('ipdesk.reports.urls')),
    re_path(r'^media/(?P<path>.*)$', serve, {'document_root': settings.MEDIA_ROOT}),
]
