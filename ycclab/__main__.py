from ycclab.main import main

main()
