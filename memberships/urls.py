"""
URL configuration for memberships app.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import (
    MembershipOfferViewSet,
    MembershipViewSet,
    PurchaseMembershipView,
    ProviderConfigurationView,
)


router = DefaultRouter()
router.register(r'offers', MembershipOfferViewSet, basename='membershipoffer')
router.register(r'memberships', MembershipViewSet, basename='membership')

urlpatterns = [
    path('', include(router.urls)),
    path(
        'purchase/',
        PurchaseMembershipView.as_view(),
        name='membership-purchase'
    ),
    path(
        'types/<slug:membership_type_id>/provider-configuration/',
        ProviderConfigurationView.as_view(),
        name='membership-provider-configuration'
    ),
]
