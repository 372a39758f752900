"""
FireWorks ML 쇼핑몰 Django 프로젝트
"""
