from django.urls import path
from .views import country_list, state_list, city_list, resolve_selection

urlpatterns = [
    path('locations/countries/', country_list, name='location-country-list'),
    path('locations/states/', state_list, name='location-state-list'),
    path('locations/cities/', city_list, name='location-city-list'),
    path('locations/resolve/', resolve_selection, name='location-resolve'),
]
