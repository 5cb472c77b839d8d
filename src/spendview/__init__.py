"""Mobile-money spending dashboard."""
