from django.urls import path

from . import views

urlpatterns = [
    path('', views.onboarding_data, name='onboarding-data'),
    path('step/<int:step>/', views.save_onboarding_step, name='onboarding-step'),
    path('postal-format/', views.postal_code_format, name='postal-code-format'),
]
