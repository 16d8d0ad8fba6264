from leaderboard import create_app

app = create_app()

if __name__ == '__main__':
    app.run(port=app.config.get('PORT', 3000), debug=app.config.get('APP_ENV') != 'production')
