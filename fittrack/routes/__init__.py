from .home_routes import home_bp
from .auth_routes import auth_bp
from .profile_routes import profile_bp
from .food_routes import food_bp
from .meal_routes import meal_bp
from .weight_routes import weight_bp
from .measurement_routes import measurement_bp
from .dashboard_routes import dashboard_bp
from .recommendation_routes import recommendation_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(weight_bp)
    app.register_blueprint(measurement_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(recommendation_bp)
