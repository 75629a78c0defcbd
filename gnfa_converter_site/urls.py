from django.urls import include, path

urlpatterns = [
    path('', include('gnfa_converter.urls')),
]
