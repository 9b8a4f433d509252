"""Couche domaine : entites, objets valeur, ports et exceptions."""
