"""TourPro: tour booking and management API"""
