from django.urls import path
from . import views

urlpatterns = [
    # NFA -> regular expression by state elimination
    path('api/nfa-to-regex/', views.convert_nfa_to_regex, name='nfa_to_regex'),
]
