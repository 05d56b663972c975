from toastqueue.main import main

main()
