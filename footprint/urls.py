from django.urls import path

from . import views

urlpatterns = [
    path('generate/', views.generate_footprint, name='footprint-generate'),
    path('latest/', views.latest_footprint, name='footprint-latest'),
    path('actions/toggle/', views.toggle_action, name='footprint-toggle-action'),
    path('chat/', views.chat, name='footprint-chat'),
]
