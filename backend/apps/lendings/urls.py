"""
URL configuration for lendings app.
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import LendingViewSet

router = DefaultRouter()
router.register(r'lendings', LendingViewSet, basename='lending')

urlpatterns = [
    path('', include(router.urls)),
]
