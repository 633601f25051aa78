from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'rentals'

urlpatterns = [
    path('ping/', ping_view('rental'), name='ping'),

    # GET  /api/v1/rental/rentals/ - List my rentals
    # POST /api/v1/rental/rentals/ - Request a rental
    path('rentals/', views.rental_list, name='rental-list'),

    # GET       /api/v1/rental/rentals/{id}/ - Get rental
    # PUT/PATCH /api/v1/rental/rentals/{id}/ - Update status or notes
    path('rentals/<uuid:rental_id>/', views.rental_detail, name='rental-detail'),

    # POST /api/v1/rental/availability/ - Check product availability
    path('availability/', views.availability, name='availability'),
]
