from django.urls import include, path

urlpatterns = [
    path('api/', include('currency_proxy.urls')),
]
