"""URL configuration for the billing admin API."""

from django.urls import URLPattern, path

from apps.billing.views import AdminCheckView, GSTCalculationView, MerchantGSTConfigView

app_name = "billing"

urlpatterns: list[URLPattern] = [
    path("check/", AdminCheckView.as_view(), name="admin-check"),
    path(
        "merchant-gst-config/",
        MerchantGSTConfigView.as_view(),
        name="merchant-gst-config",
    ),
    path("gst/calculate/", GSTCalculationView.as_view(), name="gst-calculate"),
]
