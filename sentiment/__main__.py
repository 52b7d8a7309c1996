from sentiment.main import main

main()
